# clinical_logic.py
from rate_calculations import classify_dose, is_standard_preparation


class DoseInterpreter:
    def __init__(self, drug):
        self.drug = drug
        self.dosing = drug.dosing

    def assess_dose(self, dose):
        """Assess the requested dose against the standard dosing range"""
        assessment = []
        status = classify_dose(dose, self.dosing)
        dose_min, dose_max, unit = self.dosing.min, self.dosing.max, self.dosing.unit

        if status == "low":
            assessment.append(f"BELOW STANDARD RANGE: Dose ({dose} {unit}) is below the usual range ({dose_min}-{dose_max} {unit})")
        elif status == "high":
            assessment.append(f"ABOVE STANDARD RANGE: Dose ({dose} {unit}) is above the usual range ({dose_min}-{dose_max} {unit})")
            if dose > dose_max * 2:
                assessment.append(f"Dose is more than twice the usual maximum for {self.drug.short_name}")
        else:
            assessment.append(f"WITHIN STANDARD RANGE: Dose ({dose} {unit}) is within the usual range ({dose_min}-{dose_max} {unit})")

        return assessment, status

    def preparation_alert(self, amount, unit, volume):
        """Concentration alert text when the syringe is not the standard preparation"""
        if is_standard_preparation(self.drug, amount, unit, volume):
            return None

        standard = self.drug.standard_formulation
        return (
            f"Using non-standard preparation: {amount}{unit} in {volume}ml. "
            f"Standard is {standard.amount}{standard.unit} in {standard.volume}ml. "
            "Please verify preparation."
        )

    def generate_recommendations(self, status, is_standard_prep=True):
        """Recommendations for the bedside based on dose status and preparation"""
        recommendations = []

        if status == "low":
            recommendations.append("Dose is below the usual starting range; confirm the intended dose before starting the infusion")
            recommendations.append("Titrate upwards to the target MAP/perfusion goals")
        elif status == "high":
            recommendations.append("🚨 Dose exceeds the usual maximum; confirm with the prescriber before administering")
            recommendations.append("Consider adding a second agent rather than escalating a single agent further")
            if self.drug.short_name == "Vasopressin":
                recommendations.append("🚨 Vasopressin above 0.04 units/min can cause cardiac ischemia; reserve for salvage therapy")
        else:
            recommendations.append("Dose is within the standard range")
            recommendations.append("Titrate to clinical response with continuous haemodynamic monitoring")

        if not is_standard_prep:
            recommendations.append("👁️ Non-standard syringe: label the syringe clearly and double-check the concentration on the pump")

        recommendations.append("Administer via an infusion pump, preferably through a central line")

        return recommendations

    def format_interpretation(self, assessment, status, recommendations):
        """Format the assessment and recommendations as markdown"""
        status_icons = {
            "standard": "✅",
            "low": "❌",
            "high": "⚠️"
        }
        icon = status_icons.get(status, "")

        lines = [f"**Dose status:** {icon} {status.upper()}", "", "**Assessment:**"]
        lines.extend(f"- {item}" for item in assessment)
        lines.append("")
        lines.append("**Recommendations:**")
        lines.extend(f"- {item}" for item in recommendations)

        return "\n".join(lines)
