from decimal import ROUND_HALF_UP, Decimal

from bilirubin.engine.models import CurveTable


def linear_interpolate(points: CurveTable, x: float) -> float:
    """Read a curve at ``x``, holding the end values flat outside its range.

    ``points`` must be non-empty and sorted by x. Where two neighbouring
    points share an x value the left point's y is returned.
    """
    first_x, first_y = points[0]
    last_x, last_y = points[-1]
    if x <= first_x:
        return first_y
    if x >= last_x:
        return last_y

    right_index = next(i for i, (px, _) in enumerate(points) if px >= x)
    x0, y0 = points[right_index - 1] if right_index > 0 else points[0]
    x1, y1 = points[right_index]

    if x1 == x0:
        return y0
    return y0 + (x - x0) * (y1 - y0) / (x1 - x0)


def round_half_up(value: float, places: int) -> float:
    """Round half away from zero, on the shortest decimal repr of ``value``."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
