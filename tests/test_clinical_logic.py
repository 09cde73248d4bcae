from clinical_logic import DoseInterpreter
from drug_catalog import get_drug

NOREPINEPHRINE = get_drug("Norepinephrine (Noradrenaline)")
VASOPRESSIN = get_drug("Vasopressin")


def test_assess_dose_statuses():
    interpreter = DoseInterpreter(NOREPINEPHRINE)

    assessment, status = interpreter.assess_dose(0.1)
    assert status == "standard"
    assert assessment[0].startswith("WITHIN STANDARD RANGE")

    assessment, status = interpreter.assess_dose(0.01)
    assert status == "low"
    assert assessment[0].startswith("BELOW STANDARD RANGE")

    assessment, status = interpreter.assess_dose(0.6)
    assert status == "high"
    assert len(assessment) == 1

    assessment, status = interpreter.assess_dose(2)
    assert status == "high"
    assert "more than twice the usual maximum for Norepinephrine" in assessment[1]


def test_preparation_alert_only_for_non_standard_syringe():
    interpreter = DoseInterpreter(NOREPINEPHRINE)

    assert interpreter.preparation_alert(4, "mg", 50) is None
    assert interpreter.preparation_alert(8, "mg", 50) == (
        "Using non-standard preparation: 8mg in 50ml. "
        "Standard is 4mg in 50ml. Please verify preparation."
    )


def test_recommendations_follow_status():
    interpreter = DoseInterpreter(NOREPINEPHRINE)

    standard = interpreter.generate_recommendations("standard")
    assert standard[0] == "Dose is within the standard range"

    high = interpreter.generate_recommendations("high")
    assert any("exceeds the usual maximum" in r for r in high)
    assert not any("Vasopressin" in r for r in high)


def test_vasopressin_high_dose_warns_of_ischemia():
    recommendations = DoseInterpreter(VASOPRESSIN).generate_recommendations("high")
    assert any("cardiac ischemia" in r for r in recommendations)


def test_non_standard_prep_adds_recommendation():
    interpreter = DoseInterpreter(NOREPINEPHRINE)
    standard = interpreter.generate_recommendations("standard", is_standard_prep=True)
    custom = interpreter.generate_recommendations("standard", is_standard_prep=False)
    assert len(custom) == len(standard) + 1
    assert any("Non-standard syringe" in r for r in custom)


def test_format_interpretation():
    interpreter = DoseInterpreter(NOREPINEPHRINE)
    assessment, status = interpreter.assess_dose(0.01)
    text = interpreter.format_interpretation(assessment, status, ["Check the order"])

    assert text.startswith("**Dose status:** ❌ LOW")
    assert "- BELOW STANDARD RANGE" in text
    assert text.endswith("- Check the order")
