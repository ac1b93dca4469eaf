"""Maisels threshold bands for preterm infants below 35 weeks."""

from bilirubin.engine.models import TherapyThresholds, ThresholdResult, ThresholdStatus
from bilirubin.engine.tables import MAISELS_BANDS, MAISELS_BRACKETS, MaiselsBand


def select_maisels_band(aog: float) -> MaiselsBand:
    for upper_bound, key in MAISELS_BRACKETS:
        if aog < upper_bound:
            return MAISELS_BANDS[key]
    return MAISELS_BANDS[MAISELS_BRACKETS[-1][1]]


def get_maisels_thresholds(aog: float, tcb: float) -> TherapyThresholds:
    band = select_maisels_band(aog)
    return TherapyThresholds(
        phototherapy=_range_result(band.phototherapy, tcb),
        exchange_transfusion=_range_result(band.exchange_transfusion, tcb),
    )


def _range_result(bounds: tuple[float, float], tcb: float) -> ThresholdResult:
    low, high = bounds
    if tcb > high:
        status = ThresholdStatus.ABOVE
    elif tcb < low:
        status = ThresholdStatus.BELOW
    else:
        status = ThresholdStatus.WITHIN
    return ThresholdResult(status=status, threshold=f"{low:g}-{high:g}")
