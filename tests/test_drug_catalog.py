import dataclasses

import pytest

from config import DRUG_CONFIGS
from drug_catalog import DRUG_CATALOG, _build_drug, drug_names, get_drug


def test_catalog_has_every_configured_drug_in_order():
    assert drug_names() == list(DRUG_CONFIGS)
    assert drug_names() == [
        "Norepinephrine (Noradrenaline)",
        "Epinephrine (Adrenaline)",
        "Dopamine",
        "Dobutamine",
        "Vasopressin",
        "Milrinone",
        "Nitroglycerin (Glyceryl Trinitrate)",
    ]


def test_lookup_miss_means_no_drug_selected():
    assert get_drug("Phenylephrine") is None
    assert get_drug("") is None
    assert get_drug(None) is None


@pytest.mark.parametrize("drug", DRUG_CATALOG, ids=lambda d: d.short_name)
def test_catalog_invariants(drug):
    assert drug.dosing.min <= drug.dosing.max
    assert drug.standard_formulation.amount > 0
    assert drug.standard_formulation.volume > 0
    assert get_drug(drug.name) is drug


def test_expected_units_and_weight_requirements():
    units = {drug.short_name: drug.expected_unit for drug in DRUG_CATALOG}
    assert units == {
        "Norepinephrine": "mg",
        "Epinephrine": "mg",
        "Dopamine": "mg",
        "Dobutamine": "mg",
        "Vasopressin": "units",
        "Milrinone": "mg",
        "Nitroglycerin": "mg",
    }

    not_weight_based = [drug.short_name for drug in DRUG_CATALOG if not drug.dosing.is_weight_based]
    assert not_weight_based == ["Vasopressin", "Nitroglycerin"]


def test_dosing_derived_fields():
    dosing = get_drug("Norepinephrine (Noradrenaline)").dosing
    assert dosing.range == "0.05–0.5"
    assert dosing.amount_unit == "mcg"
    assert dosing.midpoint == pytest.approx(0.275)
    assert get_drug("Vasopressin").dosing.amount_unit == "units"


def test_records_are_immutable():
    drug = get_drug("Dopamine")
    with pytest.raises(dataclasses.FrozenInstanceError):
        drug.name = "Something else"
    with pytest.raises(dataclasses.FrozenInstanceError):
        drug.dosing.max = 50


def test_formulation_description():
    assert get_drug("Vasopressin").standard_formulation.describe() == "20units in 50ml"


def _config(**dosing_overrides):
    dosing = {"min": 1, "max": 2, "unit": "mcg/min", "weight_based": False, "time_base": "min"}
    dosing.update(dosing_overrides)
    return {
        "brands": [],
        "concentrations_available": [],
        "standard_formulation": {"amount": 10, "unit": "mg", "volume": 50},
        "dosing": dosing,
    }


def test_build_rejects_inverted_dosing_range():
    with pytest.raises(ValueError, match="exceeds max"):
        _build_drug("Bad", _config(min=5, max=1))


def test_build_rejects_unknown_units():
    with pytest.raises(ValueError, match="unknown dose unit"):
        _build_drug("Bad", _config(unit="mg/hr"))
    with pytest.raises(ValueError, match="unknown time base"):
        _build_drug("Bad", _config(time_base="sec"))
    with pytest.raises(ValueError, match="does not match time base"):
        _build_drug("Bad", _config(time_base="hr"))


def test_build_rejects_empty_formulation():
    cfg = _config()
    cfg["standard_formulation"] = {"amount": 0, "unit": "mg", "volume": 50}
    with pytest.raises(ValueError, match="positive amount and volume"):
        _build_drug("Bad", cfg)


def test_hourly_time_base_skips_minute_conversion():
    drug = _build_drug("Hourly", _config(unit="mcg/hr", time_base="hr"))
    result = drug.calculate_rate(600, None, 10, "mg", 50)
    # 10 mg / 50 ml = 200 mcg/ml; 600 mcg/hr -> 3 ml/hr
    assert result["rate"] == pytest.approx(3.0)
    assert "min/hr" not in result["formula"]
    assert drug.short_name == "Hourly"
