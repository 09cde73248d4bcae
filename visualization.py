# visualization.py
import logging

import altair as alt
import numpy as np
import pandas as pd
import streamlit as st

from rate_calculations import RateCalculator, round_rate

logger = logging.getLogger(__name__)


class InfusionVisualizer:
    @staticmethod
    def titration_table(drug, weight, amount, unit, volume, steps=10):
        """
        Pump rates across the standard dosing range for one syringe.

        Parameters:
        - drug: Drug record
        - weight: Patient weight in kg (None for non weight-based drugs)
        - amount, unit, volume: Syringe preparation
        - steps: Number of doses between min and max (inclusive)

        Returns:
        - DataFrame with Dose, Rate (ml/hr) and Status columns
        """
        calculator = RateCalculator(drug)
        doses = np.linspace(drug.dosing.min, drug.dosing.max, steps)

        rows = []
        for dose in doses:
            dose = round(float(dose), 4)
            result = calculator.calculate_rate(dose, weight, amount, unit, volume)
            rows.append({
                "Dose": dose,
                "Rate (ml/hr)": round_rate(result["rate"]),
                "Status": result["dose_status"]
            })

        return pd.DataFrame(rows, columns=["Dose", "Rate (ml/hr)", "Status"])

    @staticmethod
    def plot_titration_curve(drug, weight, amount, unit, volume, dose=None, steps=20):
        """
        Rate vs dose chart with the standard dosing range shaded.

        Returns:
        - Altair layered chart
        """
        df = InfusionVisualizer.titration_table(drug, weight, amount, unit, volume, steps)
        dose_title = f"Dose ({drug.dosing.unit})"

        band = alt.Chart(
            pd.DataFrame({'x1': [drug.dosing.min], 'x2': [drug.dosing.max]})
        ).mark_rect(opacity=0.15, color='lightgreen').encode(
            x='x1', x2='x2',
            tooltip=alt.value(f"Standard range ({drug.dosing.range} {drug.dosing.unit})")
        )

        line = alt.Chart(df).mark_line(color='firebrick').encode(
            x=alt.X('Dose', title=dose_title),
            y=alt.Y('Rate (ml/hr)', title='Pump Rate (ml/hr)', scale=alt.Scale(zero=True)),
            tooltip=['Dose', alt.Tooltip('Rate (ml/hr)', format=".2f")]
        )

        layers = [band, line]

        if dose is not None:
            result = RateCalculator(drug).calculate_rate(dose, weight, amount, unit, volume)
            point_df = pd.DataFrame({'Dose': [dose], 'Rate (ml/hr)': [result["rate"]]})
            layers.append(
                alt.Chart(point_df).mark_point(size=100, filled=True, color='black').encode(
                    x='Dose',
                    y='Rate (ml/hr)',
                    tooltip=['Dose', alt.Tooltip('Rate (ml/hr)', format=".2f")]
                )
            )

        return alt.layer(*layers).properties(
            height=350,
            title=f'Titration Curve ({drug.short_name}, {amount}{unit} in {volume}ml)'
        ).interactive()

    @staticmethod
    def display_titration_chart(drug, weight, amount, unit, volume, dose=None, key_suffix=""):
        """Display the titration table and chart behind a checkbox."""
        checkbox_key = f"show_titration_{key_suffix}"

        if st.checkbox("Show Titration Table", key=checkbox_key):
            try:
                st.dataframe(
                    InfusionVisualizer.titration_table(drug, weight, amount, unit, volume),
                    hide_index=True,
                    use_container_width=True
                )
                chart = InfusionVisualizer.plot_titration_curve(drug, weight, amount, unit, volume, dose)
                st.altair_chart(chart, use_container_width=True)
            except ValueError as e:
                logger.warning("Titration chart unavailable: %s", e)
                st.warning(f"Unable to display titration table: {e}")
