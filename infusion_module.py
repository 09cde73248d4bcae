# infusion_module.py
import logging

import streamlit as st

from clinical_logic import DoseInterpreter
from config import CONCENTRATION_UNITS
from rate_calculations import is_standard_preparation
from ui_components import UIComponents
from validation_utils import ValidationUtils
from visualization import InfusionVisualizer

logger = logging.getLogger(__name__)


class InfusionModule:
    @staticmethod
    def rate_calculator(patient_data):
        st.title("🧮 Infusion Rate Calculator")

        drug = patient_data['drug']
        if drug is None:
            st.info("Select a drug in the sidebar to start.")
            return

        UIComponents.display_drug_info(drug)
        UIComponents.create_help_expander(
            "How the rate is calculated",
            "Concentration (per ml) = drug amount / syringe volume, converted to mcg/ml when the amount is in mg.\n\n"
            "Rate (ml/hr) = dose × weight (for per-kg doses) × 60 min/hr / concentration.\n\n"
            "Doses outside the standard range are flagged but still calculated."
        )

        if drug.dosing.is_weight_based and not patient_data['weight']:
            st.info("Enter the patient weight in the sidebar; this drug is dosed per kg.")

        # Desired dose
        col1, col2 = st.columns([3, 1])
        with col1:
            dose = st.number_input(
                "Desired Dose",
                min_value=0.0,
                value=None,
                step=None,
                format="%g",
                placeholder="Enter dose value",
                key=f"dose_{drug.name}"
            )
        with col2:
            st.text_input("Unit", value=drug.dosing.unit, disabled=True, key=f"dose_unit_{drug.name}")

        # Preparation defaults to the standard formulation for the selected drug
        standard = drug.standard_formulation
        st.markdown("#### 🧪 Preparation / Concentration")
        col1, col2, col3 = st.columns(3)
        with col1:
            amount = st.number_input(
                "Drug Amount",
                min_value=0.0,
                value=float(standard.amount),
                format="%g",
                key=f"amount_{drug.name}"
            )
        with col2:
            unit = st.selectbox(
                "Unit",
                CONCENTRATION_UNITS,
                index=CONCENTRATION_UNITS.index(standard.unit),
                key=f"amount_unit_{drug.name}"
            )
        with col3:
            volume = st.number_input(
                "in Volume (ml)",
                min_value=0,
                value=int(standard.volume),
                step=1,
                key=f"volume_{drug.name}"
            )

        # Keep showing results on reruns triggered by widgets below the button
        if st.button("Calculate Rate", type="primary"):
            st.session_state['calculated_drug'] = drug.name
        if st.session_state.get('calculated_drug') != drug.name:
            return

        weight = patient_data['weight']
        warnings, errors = ValidationUtils.validate_infusion_inputs(drug, dose, weight, amount, unit, volume)
        if not ValidationUtils.display_validation_results(warnings, errors):
            return

        result, error = ValidationUtils.calculate_with_error_handling(
            drug.calculate_rate, dose, weight, amount, unit, volume
        )
        if error:
            logger.warning("Calculation error for %s: %s", drug.name, error)
            st.error(f"Calculation Error: {error}")
            return

        interpreter = DoseInterpreter(drug)
        alert = interpreter.preparation_alert(amount, unit, volume)
        UIComponents.display_results(result, drug, alert)

        assessment, status = interpreter.assess_dose(dose)
        recommendations = interpreter.generate_recommendations(
            status, is_standard_preparation(drug, amount, unit, volume)
        )
        interpretation = interpreter.format_interpretation(assessment, status, recommendations)

        st.markdown("### Clinical Interpretation")
        st.markdown(interpretation)

        InfusionVisualizer.display_titration_chart(drug, weight, amount, unit, volume, dose, key_suffix=drug.name)

        inputs = {"dose": dose, "amount": amount, "unit": unit, "volume": volume}
        report = UIComponents.generate_report(drug, patient_data, inputs, result, interpretation)
        UIComponents.create_print_button(report)

    @staticmethod
    def reference_guide():
        st.title("📖 Vasopressor Reference")
        st.markdown("Adult intravenous dosing for common vasopressors and inotropes")
        UIComponents.display_reference_table()
