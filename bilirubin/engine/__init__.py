from bilirubin.engine.calculator import calculate_risk
from bilirubin.engine.models import (
    BhutaniRiskZone,
    CalculationInput,
    CalculationResult,
    ThresholdResult,
    ThresholdStatus,
)
from bilirubin.engine.validator import validate_and_parse

__all__ = [
    "BhutaniRiskZone",
    "CalculationInput",
    "CalculationResult",
    "ThresholdResult",
    "ThresholdStatus",
    "calculate_risk",
    "validate_and_parse",
]
