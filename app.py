# app.py
import logging

import streamlit as st

from config import LOG_LEVEL, LOG_FORMAT
from infusion_module import InfusionModule
from ui_components import UIComponents

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

# Set page configuration
st.set_page_config(
    page_title="ICU DoseCalc",
    page_icon="💉",
    layout="centered"
)

st.markdown("""
<style>
    .main .block-container {
        padding-top: 2rem;
    }
    h1, h2, h3 {
        margin-top: 0.8rem;
        margin-bottom: 0.8rem;
    }
    .stAlert {
        margin-top: 1rem;
        margin-bottom: 1rem;
    }
    .stAlert.st-ae.st-af {
        border-left-width: 4px !important;
    }
</style>
""", unsafe_allow_html=True)


def main():
    """Main application entry point"""
    page, patient_data = UIComponents.create_patient_sidebar()

    st.title("ICU DoseCalc")
    st.markdown("Vasopressor & Inotrope Infusion Rate Calculator")

    drug = patient_data['drug']
    if drug is not None:
        weight = patient_data['weight']
        st.info(f"**Drug**: {drug.name} | **Weight**: {f'{weight} kg' if weight else 'N/A'} | "
                f"**Standard Prep**: {drug.standard_formulation.describe()}")

    st.markdown("---")

    if page == "Infusion Rate Calculator":
        InfusionModule.rate_calculator(patient_data)
    elif page == "Vasopressor Reference":
        InfusionModule.reference_guide()

    st.markdown("---")
    st.markdown("""
    <div style="text-align: center; color: #666;">
        <p><small>This tool is provided for educational and clinical support purposes only.<br>
        Always double-check calculations and follow institutional protocols.</small></p>
    </div>
    """, unsafe_allow_html=True)


if __name__ == "__main__":
    main()
