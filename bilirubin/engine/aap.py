"""AAP phototherapy and exchange transfusion thresholds for infants >= 35 weeks."""

from bilirubin.engine.interpolation import linear_interpolate, round_half_up
from bilirubin.engine.models import (
    CurveTable,
    TherapyThresholds,
    ThresholdResult,
    ThresholdStatus,
)
from bilirubin.engine.tables import (
    AAP_EXCHANGE_TRANSFUSION,
    AAP_LOWER_RISK_MIN_WEEKS,
    AAP_PHOTOTHERAPY,
    RiskCurves,
)


def select_risk_curve(curves: RiskCurves, aog: float, has_risk_factors: bool) -> CurveTable:
    """Pick the curve for the infant's gestational bracket and risk factors."""
    if aog >= AAP_LOWER_RISK_MIN_WEEKS:
        return curves.medium_risk if has_risk_factors else curves.lower_risk
    return curves.higher_risk if has_risk_factors else curves.medium_risk


def get_aap_thresholds(
    hol: float,
    aog: float,
    has_risk_factors: bool,
    tcb: float,
) -> TherapyThresholds:
    return TherapyThresholds(
        phototherapy=_threshold_result(
            select_risk_curve(AAP_PHOTOTHERAPY, aog, has_risk_factors), hol, tcb
        ),
        exchange_transfusion=_threshold_result(
            select_risk_curve(AAP_EXCHANGE_TRANSFUSION, aog, has_risk_factors), hol, tcb
        ),
    )


def _threshold_result(curve: CurveTable, hol: float, tcb: float) -> ThresholdResult:
    threshold = linear_interpolate(curve, hol)
    # Status is decided on the unrounded curve value.
    status = ThresholdStatus.ABOVE if tcb >= threshold else ThresholdStatus.BELOW
    return ThresholdResult(status=status, threshold=round_half_up(threshold, 2))
