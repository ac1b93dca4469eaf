"""Validates a CalculationInput before any curve lookup happens."""

import math

from bilirubin.engine.exceptions import CalculationValidationError
from bilirubin.engine.models import CalculationInput, ParsedTimes
from bilirubin.engine.timestamps import parse_timestamp


def validate_and_parse(calculation_input: CalculationInput) -> ParsedTimes:
    """Check required fields and chronology, returning the parsed instants.

    Zero and NaN count as missing for the TCB value and gestational weeks.

    Raises:
        CalculationValidationError: on any validation failure.
    """
    _require_fields(calculation_input)
    birth = parse_timestamp(calculation_input.birth_date_time)
    measurement = parse_timestamp(calculation_input.measurement_date_time)

    if (birth.tzinfo is None) != (measurement.tzinfo is None):
        raise CalculationValidationError(
            "Birth and measurement times must both include or both omit a UTC offset"
        )
    if measurement <= birth:
        raise CalculationValidationError(
            "Measurement date-time must be after birth date-time"
        )
    return ParsedTimes(birth=birth, measurement=measurement)


def _require_fields(calculation_input: CalculationInput) -> None:
    required = {
        "birth_date_time": calculation_input.birth_date_time,
        "measurement_date_time": calculation_input.measurement_date_time,
        "tcb_value": calculation_input.tcb_value,
        "gestational_weeks": calculation_input.gestational_weeks,
    }
    for name, value in required.items():
        if not value or (isinstance(value, float) and math.isnan(value)):
            raise CalculationValidationError(f"Missing required field: {name}")
