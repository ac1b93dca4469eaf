import logging
from collections.abc import Iterator

import pytest

from bilirubin.engine.models import CalculationInput


@pytest.fixture(autouse=True)
def reset_bilirubin_logger() -> Iterator[None]:
    """Drop handlers attached by Log.configure so each test starts clean."""
    yield
    logger = logging.getLogger("bilirubin")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def term_input() -> CalculationInput:
    """A 38 week infant measured exactly 24 hours after birth."""
    return CalculationInput(
        birth_date_time="2024-01-01T10:00",
        measurement_date_time="2024-01-02T10:00",
        tcb_value=10,
        gestational_weeks=38,
        gestational_days=0,
        has_risk_factors=False,
    )
