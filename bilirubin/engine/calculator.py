"""Neonatal hyperbilirubinemia risk engine."""

import math

from bilirubin.engine.aap import get_aap_thresholds
from bilirubin.engine.bhutani import get_bhutani_zone
from bilirubin.engine.exceptions import CalculationValidationError
from bilirubin.engine.interpolation import round_half_up
from bilirubin.engine.maisels import get_maisels_thresholds
from bilirubin.engine.models import (
    BhutaniRiskZone,
    CalculationInput,
    CalculationResult,
    ParsedTimes,
)
from bilirubin.engine.tables import AAP_MIN_GESTATIONAL_WEEKS
from bilirubin.engine.validator import validate_and_parse
from bilirubin.logging.logger import Log

DEFAULT_DATE_FORMAT = "%m/%d/%Y"
DEFAULT_TIME_FORMAT = "%I:%M:%S %p"


def calculate_risk(
    calculation_input: CalculationInput,
    *,
    date_format: str = DEFAULT_DATE_FORMAT,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> CalculationResult | None:
    """Classify a TCB measurement against the Bhutani, AAP and Maisels guidelines.

    Returns None when the input fails validation; use
    ``validate_and_parse`` directly to learn why.
    """
    try:
        times = validate_and_parse(calculation_input)
    except CalculationValidationError as exc:
        Log.warning(f"Rejected calculation input: {exc}")
        return None
    return _build_result(calculation_input, times, date_format, time_format)


def gestational_age_decimal(weeks: int, days: int) -> float:
    return weeks + days / 7


def corrected_gestational_days(weeks: int, days: int, hol: float) -> float:
    """Postmenstrual age in days: birth gestational age plus time since birth."""
    return weeks * 7 + days + hol / 24


def format_gestational_age(weeks: int, days: int) -> str:
    return f"{weeks}w {days}d"


def format_corrected_age(total_days: float) -> str:
    weeks = math.floor(total_days / 7)
    days = math.floor(total_days - weeks * 7)
    return f"{format_gestational_age(weeks, days)} (PCA)"


def _build_result(
    calculation_input: CalculationInput,
    times: ParsedTimes,
    date_format: str,
    time_format: str,
) -> CalculationResult:
    weeks = calculation_input.gestational_weeks
    days = calculation_input.gestational_days
    tcb = calculation_input.tcb_value
    hol = times.hours_of_life

    aog = gestational_age_decimal(weeks, days)
    corrected_aog: str | None = None
    use_corrected = (
        calculation_input.use_pediatric_corrected_age
        and aog < AAP_MIN_GESTATIONAL_WEEKS
    )
    if use_corrected:
        total_days = corrected_gestational_days(weeks, days, hol)
        aog = total_days / 7
        corrected_aog = format_corrected_age(total_days)

    is_using_maisels = aog < AAP_MIN_GESTATIONAL_WEEKS
    if is_using_maisels:
        bhutani_zone = BhutaniRiskZone.NOT_APPLICABLE
        thresholds = get_maisels_thresholds(aog, tcb)
    else:
        bhutani_zone = get_bhutani_zone(hol, tcb)
        thresholds = get_aap_thresholds(hol, aog, calculation_input.has_risk_factors, tcb)

    Log.debug(
        f"HOL={hol:.3f}h AOG={aog:.3f}w corrected={use_corrected} "
        f"guideline={'Maisels' if is_using_maisels else 'AAP'} zone={bhutani_zone.value}"
    )
    return CalculationResult(
        dob=times.birth.strftime(date_format),
        tob=times.birth.strftime(time_format),
        hol=round_half_up(hol, 1),
        tcb=tcb,
        aog=format_gestational_age(weeks, days),
        bhutani_zone=bhutani_zone,
        phototherapy=thresholds.phototherapy,
        exchange_transfusion=thresholds.exchange_transfusion,
        is_using_corrected_age=use_corrected,
        corrected_aog=corrected_aog,
        is_using_maisels=is_using_maisels,
    )
