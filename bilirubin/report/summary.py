"""Plain-text clinical summary of a calculation, ready to paste into a chart note."""

from bilirubin.engine.calculator import gestational_age_decimal
from bilirubin.engine.interpolation import round_half_up
from bilirubin.engine.models import CalculationInput, CalculationResult
from bilirubin.engine.tables import AAP_LOWER_RISK_MIN_WEEKS, AAP_MIN_GESTATIONAL_WEEKS
from bilirubin.engine.timestamps import split_date_time


def format_summary(calculation_input: CalculationInput, result: CalculationResult) -> str:
    """Render the summary lines for one calculation."""
    dob, tob = split_date_time(calculation_input.birth_date_time)
    weeks = calculation_input.gestational_weeks
    days = calculation_input.gestational_days

    lines = [
        f"DOB: {dob or 'N/A'}",
        f"TOB: {tob or 'N/A'}",
        f"AOG: {weeks} weeks {days}/7 days",
        f"HOL: {_round_to_int(result.hol)}",
        neonate_risk_category(weeks, days, calculation_input.has_risk_factors),
        f"TCB: {result.tcb:.1f} mg/dL",
        f"PHOTOLEVEL: {result.phototherapy.status.value} "
        f"({format_threshold(result.phototherapy.threshold)})",
        f"DVET level: {result.exchange_transfusion.status.value} "
        f"({format_threshold(result.exchange_transfusion.threshold)})",
        f"Bhutani Risk Zone: {result.bhutani_zone.value}",
    ]
    if result.corrected_aog is not None:
        lines.insert(3, f"Corrected AOG: {result.corrected_aog}")
    return "\n".join(lines)


def neonate_risk_category(weeks: int, days: int, has_risk_factors: bool) -> str:
    aog = gestational_age_decimal(weeks, days)
    if aog >= AAP_LOWER_RISK_MIN_WEEKS:
        return "Medium Risk Neonate" if has_risk_factors else "Low Risk Neonate"
    if aog >= AAP_MIN_GESTATIONAL_WEEKS:
        return "High Risk Neonate" if has_risk_factors else "Medium Risk Neonate"
    return "High Risk Neonate"


def format_threshold(threshold: float | str) -> str:
    """One decimal for numeric thresholds, ``12.0`` shown as ``12``; ranges as-is."""
    if isinstance(threshold, str):
        return threshold
    text = f"{round_half_up(threshold, 1):.1f}"
    return text[:-2] if text.endswith(".0") else text


def _round_to_int(value: float) -> int:
    return int(round_half_up(value, 0))
