"""
Reference datasets read off the published nomogram charts.

Curves map hours of life to total bilirubin in mg/dL. Everything here is
module-level immutable data shared by every calculation.
"""

from dataclasses import dataclass
from types import MappingProxyType

from bilirubin.engine.models import CurveTable


@dataclass(frozen=True)
class BhutaniCurves:
    """Percentile-track boundaries of the Bhutani hour-specific nomogram."""

    low: CurveTable
    low_intermediate: CurveTable
    high_intermediate: CurveTable


@dataclass(frozen=True)
class RiskCurves:
    """One AAP curve family split by neonatal risk tier."""

    lower_risk: CurveTable
    medium_risk: CurveTable
    higher_risk: CurveTable


@dataclass(frozen=True)
class MaiselsBand:
    """Band-constant Maisels thresholds for one gestational age bracket."""

    phototherapy: tuple[float, float]
    exchange_transfusion: tuple[float, float]


BHUTANI_ZONE_MAX_HOURS = 144
AAP_MIN_GESTATIONAL_WEEKS = 35
AAP_LOWER_RISK_MIN_WEEKS = 38

BHUTANI = BhutaniCurves(
    low=((12, 3.5), (24, 5.5), (36, 7.5), (48, 8.5), (60, 9), (96, 11.5), (144, 12.5)),
    low_intermediate=(
        (12, 5), (24, 7.5), (36, 9.5), (48, 11), (60, 12), (96, 13.5), (144, 15),
    ),
    high_intermediate=(
        (12, 6.5), (24, 9.5), (36, 12), (48, 13.5), (60, 15), (96, 17), (144, 17.5),
    ),
)

AAP_PHOTOTHERAPY = RiskCurves(
    lower_risk=((0, 5), (24, 12), (48, 15), (72, 18), (96, 20), (120, 21), (168, 21.5)),
    medium_risk=((0, 4), (24, 10), (48, 13), (72, 15), (96, 17), (120, 18), (168, 18.5)),
    higher_risk=((0, 3), (24, 8), (48, 11), (72, 13), (96, 14.5), (120, 15.5), (168, 16)),
)

# No 120 h checkpoint on the exchange transfusion chart.
AAP_EXCHANGE_TRANSFUSION = RiskCurves(
    lower_risk=((0, 12), (24, 19), (48, 22), (72, 24), (96, 25), (168, 25)),
    medium_risk=((0, 10), (24, 17), (48, 19), (72, 21), (96, 22.5), (168, 23)),
    higher_risk=((0, 8), (24, 15), (48, 17), (72, 18.5), (96, 20), (168, 20.5)),
)

MAISELS_BANDS = MappingProxyType({
    28: MaiselsBand(phototherapy=(5, 6), exchange_transfusion=(11, 14)),  # < 28 0/7
    29: MaiselsBand(phototherapy=(6, 8), exchange_transfusion=(12, 14)),  # 28 0/7 - 29 6/7
    31: MaiselsBand(phototherapy=(8, 10), exchange_transfusion=(13, 16)),  # 30 0/7 - 31 6/7
    33: MaiselsBand(phototherapy=(10, 12), exchange_transfusion=(15, 18)),  # 32 0/7 - 33 6/7
    34: MaiselsBand(phototherapy=(12, 14), exchange_transfusion=(17, 19)),  # 34 0/7 - 34 6/7
})

# (exclusive upper bound in weeks, band key), checked in order.
MAISELS_BRACKETS: tuple[tuple[float, int], ...] = (
    (28, 28),
    (30, 29),
    (32, 31),
    (34, 33),
    (float("inf"), 34),
)
