import altair as alt
import pytest

from drug_catalog import get_drug
from visualization import InfusionVisualizer

NOREPINEPHRINE = get_drug("Norepinephrine (Noradrenaline)")


def test_titration_table_spans_standard_range():
    df = InfusionVisualizer.titration_table(NOREPINEPHRINE, 70, 4, "mg", 50)

    assert list(df.columns) == ["Dose", "Rate (ml/hr)", "Status"]
    assert len(df) == 10
    assert df["Dose"].iloc[0] == pytest.approx(0.05)
    assert df["Dose"].iloc[-1] == pytest.approx(0.5)
    assert (df["Status"] == "standard").all()
    assert df["Rate (ml/hr)"].is_monotonic_increasing


def test_titration_table_rates():
    df = InfusionVisualizer.titration_table(NOREPINEPHRINE, 70, 4, "mg", 50)
    # 0.05 mcg/kg/min steps; 0.1 mcg/kg/min at 70 kg on 80 mcg/ml is 5.25 ml/hr
    assert df["Rate (ml/hr)"].iloc[1] == pytest.approx(5.25)
    assert df["Rate (ml/hr)"].iloc[-1] == pytest.approx(26.25)


def test_titration_table_for_vasopressin_without_weight():
    df = InfusionVisualizer.titration_table(get_drug("Vasopressin"), None, 20, "units", 50, steps=4)
    assert len(df) == 4
    assert df["Rate (ml/hr)"].iloc[0] == pytest.approx(1.5)
    assert df["Rate (ml/hr)"].iloc[-1] == pytest.approx(6.0)


def test_plot_titration_curve_layers():
    chart = InfusionVisualizer.plot_titration_curve(NOREPINEPHRINE, 70, 4, "mg", 50)
    assert isinstance(chart, alt.LayerChart)
    assert len(chart.layer) == 2

    chart = InfusionVisualizer.plot_titration_curve(NOREPINEPHRINE, 70, 4, "mg", 50, dose=0.1)
    assert len(chart.layer) == 3
