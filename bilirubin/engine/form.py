"""Builds a CalculationInput from raw form fields."""

import math

from bilirubin.config.settings import Settings
from bilirubin.engine.exceptions import FormValidationError
from bilirubin.engine.models import CalculationInput


def build_input(
    *,
    birth_date_time: str,
    measurement_date_time: str,
    tcb_value: str,
    gestational_weeks: str,
    gestational_days: str = "",
    has_risk_factors: bool = False,
    use_pediatric_corrected_age: bool = False,
    settings: Settings | None = None,
) -> CalculationInput:
    """Apply the form's range checks and convert text fields to numbers.

    An empty days field means 0 days.

    Raises:
        FormValidationError: with a message suitable for showing to the user.
    """
    settings = settings or Settings()
    min_weeks = settings.min_gestational_weeks
    max_weeks = settings.max_gestational_weeks

    weeks = _parse_int(gestational_weeks)
    if weeks is None or not min_weeks <= weeks <= max_weeks:
        raise FormValidationError(
            f"Gestational weeks must be between {min_weeks} and {max_weeks}."
        )

    days = 0 if gestational_days.strip() == "" else _parse_int(gestational_days)
    if days is None or not 0 <= days <= 6:
        raise FormValidationError("Gestational days must be between 0 and 6.")

    tcb = _parse_float(tcb_value)
    if tcb is None or tcb <= 0:
        raise FormValidationError("TcB value must be greater than 0.")

    return CalculationInput(
        birth_date_time=birth_date_time,
        measurement_date_time=measurement_date_time,
        tcb_value=tcb,
        gestational_weeks=weeks,
        gestational_days=days,
        has_risk_factors=has_risk_factors,
        use_pediatric_corrected_age=use_pediatric_corrected_age,
    )


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        return None


def _parse_float(raw: str) -> float | None:
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return None if math.isnan(value) or math.isinf(value) else value
