# rate_calculations.py
import logging
import math

from config import CONVERSION_FACTORS, TIME_BASE_FACTORS, RATE_DECIMALS

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Inputs the calculator cannot convert; the user must be re-prompted."""


class MissingWeightError(InvalidInputError):
    pass


class UnitMismatchError(InvalidInputError):
    pass


def concentration_per_ml(amount, unit, volume, target_unit=None):
    """
    Concentration of the prepared syringe per ml.

    Parameters:
    - amount: Amount of drug in the syringe (e.g. 4)
    - unit: Unit of that amount ("mg", "mcg" or "units")
    - volume: Dilution volume in ml
    - target_unit: Unit the concentration is expressed in; defaults to the
      unit the dose is dosed in ("mcg" for mg/mcg, "units" for units)

    Returns:
    - Concentration in target_unit/ml (0 when there is no volume)
    """
    if target_unit is None:
        target_unit = "units" if unit == "units" else "mcg"
    factor = CONVERSION_FACTORS[(unit, target_unit)]

    if volume <= 0:
        return 0.0

    return (amount / volume) * factor


def classify_dose(dose, dosing):
    """Classify a dose against the standard window; both limits count as standard."""
    if dose < dosing.min:
        return "low"
    if dose > dosing.max:
        return "high"
    return "standard"


def is_standard_preparation(drug, amount, unit, volume):
    """True when the syringe matches the drug's standard formulation exactly."""
    standard = drug.standard_formulation
    return (
        amount == standard.amount
        and unit == standard.unit
        and volume == standard.volume
    )


def round_rate(rate):
    """Round a pump rate for display."""
    if math.isinf(rate):
        return rate
    return round(rate, RATE_DECIMALS)


def _format_number(value):
    # 70.0 -> "70", 0.1 -> "0.1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class RateCalculator:
    def __init__(self, drug):
        self.drug = drug
        self.dosing = drug.dosing
        self.time_factor = TIME_BASE_FACTORS[drug.dosing.time_base]

    def check_inputs(self, weight, concentration_unit):
        """Raise the appropriate InvalidInputError for unusable inputs."""
        if self.dosing.is_weight_based and not weight:
            logger.warning("Rate requested for %s without a patient weight", self.drug.name)
            raise MissingWeightError(f"Weight is required for {self.drug.short_name}.")

        if concentration_unit != self.drug.expected_unit:
            logger.warning(
                "Rate requested for %s with concentration in %s (expected %s)",
                self.drug.name, concentration_unit, self.drug.expected_unit
            )
            raise UnitMismatchError(
                f"Concentration for {self.drug.short_name} must be in {self.drug.expected_unit}."
            )

    def calculate_rate(self, dose, weight, concentration_amount, concentration_unit, dilution_volume):
        """
        Convert a desired dose into a pump rate.

        Parameters:
        - dose: Desired dose in the drug's dosing unit (e.g. mcg/kg/min)
        - weight: Patient weight in kg (None for non weight-based drugs)
        - concentration_amount: Amount of drug in the syringe
        - concentration_unit: Unit of the amount ("mg", "mcg" or "units")
        - dilution_volume: Volume the drug is diluted in (ml)

        Returns:
        - Dictionary with rate (ml/hr), formula and dose_status
        """
        self.check_inputs(weight, concentration_unit)

        concentration = concentration_per_ml(
            concentration_amount, concentration_unit, dilution_volume, self.dosing.amount_unit
        )

        # Amount of drug needed per hour, in the dose's amount unit
        hourly_amount = dose
        if self.dosing.is_weight_based:
            hourly_amount = hourly_amount * weight
        hourly_amount = hourly_amount * self.time_factor

        rate = hourly_amount / concentration if concentration > 0 else math.inf

        formula = self.build_formula(dose, weight, concentration_amount, concentration_unit, dilution_volume)
        dose_status = classify_dose(dose, self.dosing)

        logger.debug(
            "%s: dose=%s %s weight=%s prep=%s %s/%s ml -> %.4f ml/hr (%s)",
            self.drug.name, dose, self.dosing.unit, weight, concentration_amount,
            concentration_unit, dilution_volume, rate, dose_status
        )

        return {
            "rate": rate,
            "formula": formula,
            "dose_status": dose_status
        }

    def build_formula(self, dose, weight, concentration_amount, concentration_unit, dilution_volume):
        """Human-readable formula with the values substituted in."""
        terms = [f"Dose [{_format_number(dose)} {self.dosing.unit}]"]
        if self.dosing.is_weight_based:
            terms.append(f"Weight [{_format_number(weight)} kg]")
        if self.time_factor != 1:
            terms.append(f"{self.time_factor} min/hr")

        numerator = " × ".join(terms)
        if len(terms) > 1:
            numerator = f"({numerator})"

        concentration = (
            f"Concentration [{_format_number(concentration_amount)} {concentration_unit} / "
            f"{_format_number(dilution_volume)} ml]"
        )
        factor = CONVERSION_FACTORS[(concentration_unit, self.dosing.amount_unit)]
        if factor != 1:
            concentration = f"({concentration} × {factor} {self.dosing.amount_unit}/{concentration_unit})"

        return f"Rate (ml/hr) = {numerator} / {concentration}"


def calculate_rate(drug, dose, weight, concentration_amount, concentration_unit, dilution_volume):
    """Convenience wrapper around RateCalculator for a single call."""
    calculator = RateCalculator(drug)
    return calculator.calculate_rate(
        dose, weight, concentration_amount, concentration_unit, dilution_volume
    )
