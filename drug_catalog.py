# drug_catalog.py
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from config import DRUG_CONFIGS, CONCENTRATION_UNITS, DOSE_UNITS, TIME_BASE_FACTORS
from rate_calculations import RateCalculator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DrugFormulation:
    amount: float
    unit: str            # mg, mcg, units
    volume: float        # ml

    def describe(self):
        return f"{self.amount}{self.unit} in {self.volume}ml"


@dataclass(frozen=True)
class DrugDosing:
    min: float
    max: float
    unit: str            # mcg/kg/min, mcg/min, units/min
    is_weight_based: bool
    time_base: str = "min"

    @property
    def amount_unit(self):
        return self.unit.split("/")[0]

    @property
    def range(self):
        return f"{self.min}–{self.max}"

    @property
    def midpoint(self):
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class Drug:
    name: str
    short_name: str
    brands: Tuple[str, ...]
    concentrations_available: Tuple[str, ...]
    standard_formulation: DrugFormulation
    dosing: DrugDosing

    @property
    def expected_unit(self):
        return self.standard_formulation.unit

    def calculate_rate(self, dose, weight, concentration_amount, concentration_unit, dilution_volume):
        return RateCalculator(self).calculate_rate(
            dose, weight, concentration_amount, concentration_unit, dilution_volume
        )


def _build_drug(name, cfg):
    formulation = DrugFormulation(**cfg["standard_formulation"])
    dosing_cfg = cfg["dosing"]
    dosing = DrugDosing(
        min=dosing_cfg["min"],
        max=dosing_cfg["max"],
        unit=dosing_cfg["unit"],
        is_weight_based=dosing_cfg["weight_based"],
        time_base=dosing_cfg.get("time_base", "min")
    )

    # Static data: a bad entry is a programming error, fail at import
    if dosing.min > dosing.max:
        raise ValueError(f"{name}: dosing min {dosing.min} exceeds max {dosing.max}")
    if formulation.amount <= 0 or formulation.volume <= 0:
        raise ValueError(f"{name}: standard formulation must have positive amount and volume")
    if formulation.unit not in CONCENTRATION_UNITS:
        raise ValueError(f"{name}: unknown concentration unit {formulation.unit!r}")
    if dosing.unit not in DOSE_UNITS:
        raise ValueError(f"{name}: unknown dose unit {dosing.unit!r}")
    if dosing.time_base not in TIME_BASE_FACTORS:
        raise ValueError(f"{name}: unknown time base {dosing.time_base!r}")
    if dosing.unit.split("/")[-1] != dosing.time_base:
        raise ValueError(f"{name}: dose unit {dosing.unit!r} does not match time base {dosing.time_base!r}")

    return Drug(
        name=name,
        short_name=cfg.get("short_name", name),
        brands=tuple(cfg["brands"]),
        concentrations_available=tuple(cfg["concentrations_available"]),
        standard_formulation=formulation,
        dosing=dosing
    )


DRUG_CATALOG = tuple(_build_drug(name, cfg) for name, cfg in DRUG_CONFIGS.items())

_BY_NAME = {drug.name: drug for drug in DRUG_CATALOG}

logger.debug("Drug catalog loaded with %d drugs", len(DRUG_CATALOG))


def get_drug(name) -> Optional[Drug]:
    """Look a drug up by name; None means no drug is selected."""
    return _BY_NAME.get(name)


def drug_names():
    return [drug.name for drug in DRUG_CATALOG]
