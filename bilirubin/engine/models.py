from dataclasses import dataclass
from datetime import datetime
from enum import Enum

DataPoint = tuple[float, float]
CurveTable = tuple[DataPoint, ...]


class BhutaniRiskZone(str, Enum):
    HIGH = "High Risk Zone"
    HIGH_INTERMEDIATE = "High Intermediate Risk Zone"
    LOW_INTERMEDIATE = "Low Intermediate Risk Zone"
    LOW = "Low Risk Zone"
    NOT_APPLICABLE = "Not Applicable"


class ThresholdStatus(str, Enum):
    ABOVE = "ABOVE"
    BELOW = "BELOW"
    WITHIN = "WITHIN"
    NOT_APPLICABLE = "N/A"


@dataclass(frozen=True)
class CalculationInput:
    """Raw clinical inputs for a single bilirubin measurement."""

    birth_date_time: str
    measurement_date_time: str
    tcb_value: float
    gestational_weeks: int
    gestational_days: int = 0
    has_risk_factors: bool = False
    use_pediatric_corrected_age: bool = False


@dataclass(frozen=True)
class ParsedTimes:
    """Birth and measurement instants after normalization and validation."""

    birth: datetime
    measurement: datetime

    @property
    def hours_of_life(self) -> float:
        return (self.measurement - self.birth).total_seconds() / 3600


@dataclass(frozen=True)
class ThresholdResult:
    """Guideline status for one intervention.

    ``threshold`` is a number on the AAP path and a ``"min-max"`` range
    string on the Maisels path.
    """

    status: ThresholdStatus
    threshold: float | str


@dataclass(frozen=True)
class TherapyThresholds:
    phototherapy: ThresholdResult
    exchange_transfusion: ThresholdResult


@dataclass(frozen=True)
class CalculationResult:
    """Report produced by the risk engine."""

    dob: str
    tob: str
    hol: float
    tcb: float
    aog: str
    bhutani_zone: BhutaniRiskZone
    phototherapy: ThresholdResult
    exchange_transfusion: ThresholdResult
    is_using_corrected_age: bool = False
    corrected_aog: str | None = None
    is_using_maisels: bool = False
