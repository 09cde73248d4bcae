# ui_components.py
from datetime import datetime

import pandas as pd
import streamlit as st

from config import VASOPRESSOR_REFERENCE, REFERENCE_NOTES, REFERENCE_ABBREVIATIONS, RATE_DECIMALS
from drug_catalog import drug_names, get_drug

PAGES = ["Infusion Rate Calculator", "Vasopressor Reference"]


class UIComponents:
    @staticmethod
    def create_patient_sidebar():
        """Create the sidebar with navigation, drug selection and patient weight."""
        st.sidebar.title("📊 Navigation")
        page = st.sidebar.radio("Select Module", PAGES)

        st.sidebar.title("💉 Infusion")
        patient_data = {}

        selected = st.sidebar.selectbox(
            "Drug Selection",
            ["Select a drug"] + drug_names(),
            help="Vasopressor or inotrope to be infused"
        )
        drug = get_drug(selected)
        patient_data['drug'] = drug

        # Weight is only asked for when the drug is dosed per kg
        patient_data['weight'] = None
        if drug is not None and drug.dosing.is_weight_based:
            patient_data['weight'] = st.sidebar.number_input(
                "Patient Weight (kg)",
                min_value=0.0,
                max_value=500.0,
                value=None,
                step=0.1,
                placeholder="Enter weight in kilograms"
            )

        patient_data['patient_id'] = st.sidebar.text_input("Patient ID", value="N/A")

        return page, patient_data

    @staticmethod
    def display_drug_info(drug):
        """Show brands, standard preparation and dosing range for a drug."""
        with st.expander(f"ℹ️ {drug.name}"):
            st.caption("Standard information based on typical Egyptian market availability. Always verify with local formulary.")
            standard = drug.standard_formulation
            st.markdown(f"**Brand Examples:** {', '.join(drug.brands)}")
            st.markdown(f"**Standard Prep (for {standard.volume}ml):** **{standard.describe()}**")
            st.markdown(f"**Available Ampoules/Vials:** {'; '.join(drug.concentrations_available)}")
            st.markdown(f"**Standard Dosing Range:** **{drug.dosing.range} {drug.dosing.unit}**")

    @staticmethod
    def display_results(result, drug, preparation_alert=None):
        """Display the pump rate, dose status and the formula used."""
        st.markdown("### 📊 Infusion Rate")
        col1, col2 = st.columns(2)

        col1.markdown(f"""
        **Rate (ml/hr)**
        # {result['rate']:.{RATE_DECIMALS}f}
        """)

        status = result['dose_status']
        with col2:
            st.markdown("**Dose Status**")
            if status == "standard":
                st.success(f"Within standard range ({drug.dosing.range} {drug.dosing.unit})")
            elif status == "low":
                st.warning(f"Below standard range ({drug.dosing.range} {drug.dosing.unit})")
            else:
                st.error(f"Above standard range ({drug.dosing.range} {drug.dosing.unit})")

        if preparation_alert:
            st.warning(f"**Concentration Alert:** {preparation_alert}")

        if st.toggle("Show formula", value=False):
            st.code(result['formula'], language=None)

    @staticmethod
    def display_reference_table():
        """Display the adult IV vasopressor dosing reference."""
        df = pd.DataFrame(VASOPRESSOR_REFERENCE).rename(columns={
            "agent": "Agent",
            "trade_name": "Trade Name",
            "initial_dose": "Initial Dose",
            "maintenance_dose": "Maintenance Dose",
            "max_dose": "Max Dose"
        })
        st.dataframe(df, hide_index=True, use_container_width=True)

        st.markdown("#### Important Notes:")
        st.markdown("\n".join(f"- {note}" for note in REFERENCE_NOTES))
        st.caption(f"**Abbreviations:** {REFERENCE_ABBREVIATIONS}")

    @staticmethod
    def generate_report(drug, patient_data, inputs, result, interpretation=None):
        """Generate a plain-text report of the calculation."""
        current_time = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        weight = patient_data.get('weight')
        weight_display = f"{weight} kg" if weight else "N/A"

        report = f"""
# {drug.name} Infusion Report - {current_time}

## Patient Information
- **Patient ID**: {patient_data.get('patient_id', 'N/A')}
- **Weight**: {weight_display}

## Preparation
- **Syringe**: {inputs['amount']}{inputs['unit']} in {inputs['volume']}ml
- **Standard**: {drug.standard_formulation.describe()}

## Dose
- **Desired Dose**: {inputs['dose']} {drug.dosing.unit}
- **Standard Range**: {drug.dosing.range} {drug.dosing.unit}
- **Dose Status**: {result['dose_status']}

## Result
- **Infusion Rate**: {result['rate']:.{RATE_DECIMALS}f} ml/hr
- **Formula**: {result['formula']}
"""

        if interpretation:
            plain_interpretation = interpretation.replace('✅', '[OK]')
            plain_interpretation = plain_interpretation.replace('❌', '[BELOW]')
            plain_interpretation = plain_interpretation.replace('⚠️', '[ABOVE]')
            plain_interpretation = plain_interpretation.replace('🚨', '[CRITICAL]')
            plain_interpretation = plain_interpretation.replace('👁️', '[CHECK]')

            report += f"\n## Clinical Interpretation\n{plain_interpretation}\n"

        report += f"\n---\nReport generated on: {current_time}\n"
        report += "This report is provided for clinical support purposes only. Always verify calculations before administration."

        return report

    @staticmethod
    def create_print_button(report_content):
        """Create a button to download the report as a text file."""
        timestamp = datetime.now().strftime('%Y%m%d_%H%M')
        st.download_button(
            label="📄 Download Report",
            data=report_content,
            file_name=f"infusion_report_{timestamp}.txt",
            mime="text/plain",
            help="Download a printable version of this calculation"
        )

    @staticmethod
    def create_help_expander(title, content):
        """Create an expander with help information."""
        with st.expander(f"ℹ️ {title}"):
            st.markdown(content)
