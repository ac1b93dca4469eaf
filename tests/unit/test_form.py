import pytest

from bilirubin.config.settings import Settings
from bilirubin.engine.exceptions import FormValidationError
from bilirubin.engine.form import build_input
from bilirubin.engine.models import CalculationInput


def _build(**overrides: object) -> CalculationInput:
    fields: dict[str, object] = {
        "birth_date_time": "2024/01/01 - 10:00",
        "measurement_date_time": "2024/01/02 - 10:00",
        "tcb_value": "10",
        "gestational_weeks": "38",
        "gestational_days": "2",
    }
    fields.update(overrides)
    return build_input(**fields)  # type: ignore[arg-type]


class TestValidForm:
    def test_converts_fields(self) -> None:
        data = _build(has_risk_factors=True)
        assert data.tcb_value == 10.0
        assert data.gestational_weeks == 38
        assert data.gestational_days == 2
        assert data.has_risk_factors is True
        assert data.use_pediatric_corrected_age is False
        assert data.birth_date_time == "2024/01/01 - 10:00"

    def test_empty_days_means_zero(self) -> None:
        assert _build(gestational_days="").gestational_days == 0

    def test_whitespace_tolerated(self) -> None:
        data = _build(tcb_value=" 12.5 ", gestational_weeks=" 30 ")
        assert data.tcb_value == 12.5
        assert data.gestational_weeks == 30

    def test_week_bounds_inclusive(self) -> None:
        assert _build(gestational_weeks="28").gestational_weeks == 28
        assert _build(gestational_weeks="42").gestational_weeks == 42

    def test_corrected_age_flag(self) -> None:
        assert _build(use_pediatric_corrected_age=True).use_pediatric_corrected_age is True


class TestGestationalWeeks:
    @pytest.mark.parametrize("weeks", ["27", "43", "", "abc", "38.5"])
    def test_rejected(self, weeks: str) -> None:
        with pytest.raises(FormValidationError, match="Gestational weeks must be between 28 and 42."):
            _build(gestational_weeks=weeks)

    def test_bounds_from_settings(self) -> None:
        settings = Settings(min_gestational_weeks=22, max_gestational_weeks=44)
        assert _build(gestational_weeks="23", settings=settings).gestational_weeks == 23
        with pytest.raises(FormValidationError, match="between 22 and 44"):
            _build(gestational_weeks="21", settings=settings)


class TestGestationalDays:
    @pytest.mark.parametrize("days", ["7", "-1", "x"])
    def test_rejected(self, days: str) -> None:
        with pytest.raises(FormValidationError, match="Gestational days must be between 0 and 6."):
            _build(gestational_days=days)


class TestTcbValue:
    @pytest.mark.parametrize("tcb", ["0", "-1", "", "high", "nan", "inf"])
    def test_rejected(self, tcb: str) -> None:
        with pytest.raises(FormValidationError, match="TcB value must be greater than 0."):
            _build(tcb_value=tcb)
