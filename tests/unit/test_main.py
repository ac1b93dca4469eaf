import json

import pytest

from bilirubin.main import EXIT_FORM_ERROR, EXIT_OK, EXIT_REJECTED, main

_TERM_ARGS = [
    "--birth", "2024/01/01 - 10:00",
    "--measurement", "2024/01/02 - 10:00",
    "--tcb", "10",
    "--weeks", "38",
]


class TestSummaryOutput:
    def test_prints_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(_TERM_ARGS) == EXIT_OK
        out = capsys.readouterr().out
        assert "PHOTOLEVEL: BELOW (12)" in out
        assert "DVET level: BELOW (19)" in out
        assert "Bhutani Risk Zone: High Risk Zone" in out

    def test_risk_factors_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([*_TERM_ARGS, "--risk-factors"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "Medium Risk Neonate" in out
        assert "PHOTOLEVEL: ABOVE (10)" in out

    def test_corrected_age_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = [
            "--birth", "2024/01/01 - 10:00",
            "--measurement", "2024/01/15 - 10:00",
            "--tcb", "10",
            "--weeks", "31",
            "--days", "5",
            "--corrected-age",
        ]
        assert main(args) == EXIT_OK
        assert "Corrected AOG: 33w 5d (PCA)" in capsys.readouterr().out

    def test_measurement_now(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = ["--birth", "2020/01/01 - 00:00", "--measurement", "now", "--tcb", "10",
                "--weeks", "38"]
        assert main(args) == EXIT_OK
        assert "Bhutani Risk Zone: Not Applicable" in capsys.readouterr().out


class TestJsonOutput:
    def test_prints_result_fields(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([*_TERM_ARGS, "--json"]) == EXIT_OK
        payload = json.loads(capsys.readouterr().out)
        assert payload["hol"] == 24.0
        assert payload["aog"] == "38w 0d"
        assert payload["bhutani_zone"] == "High Risk Zone"
        assert payload["phototherapy"] == {"status": "BELOW", "threshold": 12.0}
        assert payload["exchange_transfusion"]["threshold"] == 19.0
        assert payload["corrected_aog"] is None


class TestFailures:
    def test_form_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = ["--birth", "2024/01/01 - 10:00", "--measurement", "2024/01/02 - 10:00",
                "--tcb", "10", "--weeks", "27"]
        assert main(args) == EXIT_FORM_ERROR
        assert "Gestational weeks must be between 28 and 42." in capsys.readouterr().err

    def test_engine_rejection(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = ["--birth", "2024/01/02 - 10:00", "--measurement", "2024/01/01 - 10:00",
                "--tcb", "10", "--weeks", "38"]
        assert main(args) == EXIT_REJECTED
        err = capsys.readouterr().err
        assert "Could not calculate risk: Measurement date-time must be after birth" in err
        assert err.count("Measurement date-time must be after birth") == 1
        assert "[ERROR]" in err
        assert "[WARNING]" not in err

    def test_unparseable_birth(self, capsys: pytest.CaptureFixture[str]) -> None:
        args = ["--birth", "someday", "--measurement", "2024/01/01 - 10:00",
                "--tcb", "10", "--weeks", "38"]
        assert main(args) == EXIT_REJECTED
        assert "Invalid date-time" in capsys.readouterr().err

    def test_missing_required_argument(self) -> None:
        with pytest.raises(SystemExit):
            main(["--birth", "2024/01/01 - 10:00"])
