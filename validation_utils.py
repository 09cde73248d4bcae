# validation_utils.py
import logging

import streamlit as st

from config import CONCENTRATION_UNITS, WEIGHT_LIMITS_KG
from rate_calculations import InvalidInputError, is_standard_preparation

logger = logging.getLogger(__name__)


class ValidationUtils:
    @staticmethod
    def validate_infusion_inputs(drug, dose, weight, amount, unit, volume):
        """
        Validate calculator inputs before the rate is calculated

        Parameters:
        - drug: Selected Drug record (None if nothing is selected)
        - dose: Desired dose in the drug's dosing unit
        - weight: Patient weight in kg (optional for non weight-based drugs)
        - amount: Amount of drug in the syringe
        - unit: Unit of the amount ("mg", "mcg" or "units")
        - volume: Syringe volume in ml

        Returns:
        - List of warnings
        - List of errors
        """
        warnings = []
        errors = []

        if drug is None:
            errors.append("Please select a drug.")
            return warnings, errors

        # Weight
        if weight is not None and weight <= 0:
            errors.append("Weight must be positive.")
        elif drug.dosing.is_weight_based and weight is None:
            errors.append("Patient weight is required for this drug.")
        elif weight is not None and not (WEIGHT_LIMITS_KG["min"] <= weight <= WEIGHT_LIMITS_KG["max"]):
            warnings.append(f"Weight ({weight} kg) is outside the expected adult range. Verify the value entered")

        # Dose
        if dose is None:
            errors.append("Desired dose is required.")
        elif dose <= 0:
            errors.append("Dose must be positive.")
        else:
            dosing = drug.dosing
            if dose > dosing.max * 2:
                warnings.append(
                    f"Dose ({dose} {dosing.unit}) is more than double the standard maximum "
                    f"({dosing.max} {dosing.unit}). Verify the dose"
                )
            elif dose > dosing.max:
                warnings.append(f"Dose is above the standard range ({dosing.range} {dosing.unit})")
            elif dose < dosing.min:
                warnings.append(f"Dose is below the standard range ({dosing.range} {dosing.unit})")

        # Preparation
        if unit not in CONCENTRATION_UNITS:
            errors.append("Amount unit is required.")

        amount = 0 if amount is None else amount
        volume = 0 if volume is None else volume

        if amount < 0:
            errors.append("Amount cannot be negative.")
        if volume < 0:
            errors.append("Volume cannot be negative.")
        elif volume != int(volume):
            errors.append("Volume must be a whole number.")

        if volume > 0 and amount <= 0:
            errors.append("Drug amount must be positive if volume is positive.")
        elif amount > 0 and volume <= 0:
            errors.append("Syringe volume must be positive if drug amount is positive.")
        elif amount == 0 and volume == 0:
            errors.append("Enter the drug amount and syringe volume.")

        if not errors and not is_standard_preparation(drug, amount, unit, volume):
            warnings.append(
                f"Non-standard preparation ({amount}{unit} in {volume}ml). "
                f"Standard is {drug.standard_formulation.describe()}"
            )

        if errors:
            logger.info("Input validation failed for %s: %s", drug.name, "; ".join(errors))

        return warnings, errors

    @staticmethod
    def display_validation_results(warnings, errors):
        """
        Display validation warnings and errors with proper formatting

        Parameters:
        - warnings: List of warning strings
        - errors: List of error strings

        Returns:
        - Boolean indicating whether validation passed (True) or failed (False)
        """
        if errors:
            st.error("Please correct the following errors before proceeding:")
            for error in errors:
                st.error(f"• {error}")
            return False

        if warnings:
            st.warning("Please review the following warnings:")
            for warning in warnings:
                st.warning(f"• {warning}")

        return True

    @staticmethod
    def calculate_with_error_handling(func, *args, **kwargs):
        """
        Wrapper for calculation functions with error handling

        Parameters:
        - func: Function to call
        - *args, **kwargs: Arguments to pass to the function

        Returns:
        - Result from the function (or None if error)
        - Error message (or None if successful)
        """
        try:
            result = func(*args, **kwargs)
            return result, None
        except InvalidInputError as e:
            return None, str(e)
        except ZeroDivisionError:
            logger.exception("Division by zero in rate calculation")
            return None, "Calculation error: Division by zero. Check the syringe volume and drug amount."
        except ValueError as e:
            logger.exception("Value error in rate calculation")
            return None, f"Value error: {str(e)}. Check your input values."
