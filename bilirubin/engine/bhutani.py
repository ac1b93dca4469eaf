from bilirubin.engine.interpolation import linear_interpolate
from bilirubin.engine.models import BhutaniRiskZone
from bilirubin.engine.tables import BHUTANI, BHUTANI_ZONE_MAX_HOURS


def get_bhutani_zone(hol: float, tcb: float) -> BhutaniRiskZone:
    """Place a measurement on the Bhutani nomogram.

    A value sitting exactly on a curve belongs to the lower zone. The caller
    decides whether the nomogram applies to the infant's gestational age.
    """
    if hol > BHUTANI_ZONE_MAX_HOURS:
        return BhutaniRiskZone.NOT_APPLICABLE

    if tcb > linear_interpolate(BHUTANI.high_intermediate, hol):
        return BhutaniRiskZone.HIGH
    if tcb > linear_interpolate(BHUTANI.low_intermediate, hol):
        return BhutaniRiskZone.HIGH_INTERMEDIATE
    if tcb > linear_interpolate(BHUTANI.low, hol):
        return BhutaniRiskZone.LOW_INTERMEDIATE
    return BhutaniRiskZone.LOW
