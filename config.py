# config.py
import os

# Logging
LOG_LEVEL = os.environ.get("DOSECALC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Display precision for the pump rate (ml/hr)
RATE_DECIMALS = 2

CONCENTRATION_UNITS = ("mg", "mcg", "units")
DOSE_UNITS = ("mcg/kg/min", "mcg/min", "units/min", "mcg/kg/hr", "mcg/hr", "units/hr")

# Multiplier taking a concentration unit to the amount unit of the dose
CONVERSION_FACTORS = {
    ("mg", "mcg"): 1000,
    ("mcg", "mcg"): 1,
    ("units", "units"): 1,
}

# Minutes per dose time base, used to get to ml/hr
TIME_BASE_FACTORS = {
    "min": 60,
    "hr": 1,
}

# Plausible adult weight range (kg); outside it we only warn
WEIGHT_LIMITS_KG = {"min": 1, "max": 300}

DRUG_CONFIGS = {
    "Norepinephrine (Noradrenaline)": {
        "short_name": "Norepinephrine",
        "brands": ["Noradrenaline", "Levophed"],
        "concentrations_available": ["4 mg/4 mL ampoule (1 mg/mL)"],
        "standard_formulation": {"amount": 4, "unit": "mg", "volume": 50},
        "dosing": {
            "min": 0.05,
            "max": 0.5,
            "unit": "mcg/kg/min",
            "weight_based": True,
            "time_base": "min"
        }
    },
    "Epinephrine (Adrenaline)": {
        "short_name": "Epinephrine",
        "brands": ["Adrenaline 1:1000 INJ", "Dilute Adrenaline 1:10,000"],
        "concentrations_available": ["1 mg/mL (1:1000)", "0.1 mg/mL (1:10,000)"],
        "standard_formulation": {"amount": 1, "unit": "mg", "volume": 50},
        "dosing": {
            "min": 0.01,
            "max": 0.1,
            "unit": "mcg/kg/min",
            "weight_based": True,
            "time_base": "min"
        }
    },
    "Dopamine": {
        "short_name": "Dopamine",
        "brands": ["Dopamine Fresenius"],
        "concentrations_available": ["200 mg/5 mL ampoule (40 mg/mL)"],
        "standard_formulation": {"amount": 200, "unit": "mg", "volume": 50},
        "dosing": {
            "min": 2,
            "max": 20,
            "unit": "mcg/kg/min",
            "weight_based": True,
            "time_base": "min"
        }
    },
    "Dobutamine": {
        "short_name": "Dobutamine",
        "brands": ["Dobutamine HCl", "Dobutrex"],
        "concentrations_available": ["12.5 mg/mL in 20 mL (250 mg)", "250 mg/vial"],
        "standard_formulation": {"amount": 250, "unit": "mg", "volume": 50},
        "dosing": {
            "min": 2,
            "max": 20,
            "unit": "mcg/kg/min",
            "weight_based": True,
            "time_base": "min"
        }
    },
    "Vasopressin": {
        "short_name": "Vasopressin",
        "brands": ["Vasopressin Injection"],
        "concentrations_available": ["20 units/mL in 1 mL ampoule"],
        "standard_formulation": {"amount": 20, "unit": "units", "volume": 50},
        "dosing": {
            "min": 0.01,
            "max": 0.04,
            "unit": "units/min",
            "weight_based": False,
            "time_base": "min"
        }
    },
    "Milrinone": {
        "short_name": "Milrinone",
        "brands": ["Milrinone Lactate Injection"],
        "concentrations_available": ["1 mg/mL in 10 mL ampoule (10 mg total)"],
        "standard_formulation": {"amount": 10, "unit": "mg", "volume": 50},
        "dosing": {
            "min": 0.25,
            "max": 0.75,
            "unit": "mcg/kg/min",
            "weight_based": True,
            "time_base": "min"
        }
    },
    "Nitroglycerin (Glyceryl Trinitrate)": {
        "short_name": "Nitroglycerin",
        "brands": ["Nitronal", "Tridil"],
        "concentrations_available": ["1 mg/mL in 50 mL ampoule (50 mg total)"],
        "standard_formulation": {"amount": 50, "unit": "mg", "volume": 50},
        "dosing": {
            "min": 5,
            "max": 200,
            "unit": "mcg/min",
            "weight_based": False,
            "time_base": "min"
        }
    }
}

# Adult IV vasopressor reference (initial / maintenance / maximum dosing)
VASOPRESSOR_REFERENCE = [
    {
        "agent": "Norepinephrine (noradrenaline)",
        "trade_name": "Levophed",
        "initial_dose": "5 to 15 mcg/minute (0.05 to 0.15 mcg/kg/minute)\nCardiogenic shock: 0.05 mcg/kg/minute",
        "maintenance_dose": "2 to 80 mcg/minute (0.025 to 1 mcg/kg/minute)\nCardiogenic shock: 0.05 to 0.4 mcg/kg/minute",
        "max_dose": "80 to 250 mcg/minute (1 to 3.3 mcg/kg/minute)"
    },
    {
        "agent": "Epinephrine (adrenaline)",
        "trade_name": "Adrenalin",
        "initial_dose": "1 to 15 mcg/minute (0.01 to 0.2 mcg/kg/minute)",
        "maintenance_dose": "1 to 40 mcg/minute (0.01 to 0.5 mcg/kg/minute)",
        "max_dose": "40 to 160 mcg/minute (0.5 to 2 mcg/kg/minute)"
    },
    {
        "agent": "Dopamine",
        "trade_name": "Intropin",
        "initial_dose": "2 to 5 mcg/kg/minute",
        "maintenance_dose": "2 to 20 mcg/kg/minute",
        "max_dose": "20 mcg/kg/minute"
    },
    {
        "agent": "Vasopressin (arginine-vasopressin)",
        "trade_name": "Pitressin, Vasostrict",
        "initial_dose": "0.03 units/minute",
        "maintenance_dose": "0.01 to 0.04 units/minute (not titrated)",
        "max_dose": "Doses >0.04 units/minute can cause cardiac ischemia and should be reserved for salvage therapy"
    },
    {
        "agent": "Dobutamine",
        "trade_name": "Dobutrex",
        "initial_dose": "Usual: 2 to 5 mcg/kg/minute (range: 0.5 to 5 mcg/kg/minute; lower doses for less severe cardiac decompensation)",
        "maintenance_dose": "2 to 10 mcg/kg/minute",
        "max_dose": "20 mcg/kg/minute"
    },
    {
        "agent": "Milrinone",
        "trade_name": "Primacor",
        "initial_dose": "0.125 to 0.25 mcg/kg/minute",
        "maintenance_dose": "0.125 to 0.75 mcg/kg/minute",
        "max_dose": "0.75 mcg/kg/minute"
    },
    {
        "agent": "Nitroglycerin (Glyceryl Trinitrate)",
        "trade_name": "Nitronal, Tridil",
        "initial_dose": "5 to 20 mcg/minute",
        "maintenance_dose": "10 to 200 mcg/minute",
        "max_dose": "Up to 400 mcg/minute may be required in some cases"
    }
]

REFERENCE_NOTES = [
    "All doses shown are for intravenous (IV) administration in adult patients.",
    "Vasopressors can cause life-threatening hypotension and hypertension, dysrhythmias, and myocardial ischemia.",
    "They should be administered by use of an infusion pump adjusted by clinicians trained and experienced in dose titration of intravenous vasopressors using continuous noninvasive electronic monitoring of blood pressure, heart rate, rhythm, and function.",
    "Hypovolemia should be corrected prior to the institution of vasopressor therapy. Reduce infusion rate gradually; avoid sudden discontinuation.",
    "Vasopressors can cause severe local tissue ischemia; central line administration is preferred.",
    "Vasopressor infusions are high-risk medications requiring caution to prevent a medication error and patient harm."
]

REFERENCE_ABBREVIATIONS = "DSW: 5% dextrose water; MAP: mean arterial pressure; NS: 0.9% saline."
