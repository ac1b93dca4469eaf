import argparse
import json
import sys
from dataclasses import asdict
from datetime import datetime

from bilirubin.config.settings import Settings
from bilirubin.engine.calculator import calculate_risk
from bilirubin.engine.exceptions import CalculationValidationError, FormValidationError
from bilirubin.engine.form import build_input
from bilirubin.engine.timestamps import format_timestamp
from bilirubin.engine.validator import validate_and_parse
from bilirubin.logging.logger import Log
from bilirubin.report.summary import format_summary

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_FORM_ERROR = 2


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Neonatal bilirubin risk calculator (Bhutani, AAP, Maisels)"
    )
    parser.add_argument(
        "--birth",
        required=True,
        help="Birth date-time, e.g. '2024/01/01 - 10:00' or '2024-01-01T10:00'.",
    )
    parser.add_argument(
        "--measurement",
        required=True,
        help="Measurement date-time in the same shapes, or 'now'.",
    )
    parser.add_argument("--tcb", required=True, help="Transcutaneous bilirubin in mg/dL.")
    parser.add_argument("--weeks", required=True, help="Gestational age, completed weeks.")
    parser.add_argument("--days", default="", help="Gestational age, extra days (0-6).")
    parser.add_argument(
        "--risk-factors",
        action="store_true",
        help="The infant has neurotoxicity risk factors.",
    )
    parser.add_argument(
        "--corrected-age",
        action="store_true",
        help="Use pediatric corrected age for infants born before 35 weeks.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON instead of the text summary.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> form validation -> engine -> summary."""
    settings = Settings()
    Log.configure(settings.log_level)
    args = parse_arguments(argv)

    measurement = args.measurement
    if measurement.strip().lower() == "now":
        measurement = format_timestamp(datetime.now())

    try:
        calculation_input = build_input(
            birth_date_time=args.birth,
            measurement_date_time=measurement,
            tcb_value=args.tcb,
            gestational_weeks=args.weeks,
            gestational_days=args.days,
            has_risk_factors=args.risk_factors,
            use_pediatric_corrected_age=args.corrected_age,
            settings=settings,
        )
    except FormValidationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_FORM_ERROR

    try:
        validate_and_parse(calculation_input)
    except CalculationValidationError as exc:
        Log.error(f"Could not calculate risk: {exc}")
        return EXIT_REJECTED

    result = calculate_risk(
        calculation_input,
        date_format=settings.date_display_format,
        time_format=settings.time_display_format,
    )
    if result is None:
        return EXIT_REJECTED

    if args.json:
        print(json.dumps(asdict(result), indent=2))
    else:
        print(format_summary(calculation_input, result))
    Log.info(f"Calculated risk for HOL {result.hol}: {result.bhutani_zone.value}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
