"""Parsing of the free-text date-time fields typed into the calculator form."""

import re
from datetime import datetime

from bilirubin.engine.exceptions import CalculationValidationError

# First date/time boundary: " - " (any surrounding whitespace) or plain whitespace.
_DATE_TIME_SEPARATOR = re.compile(r"\s+-\s+|\s+")
_DATE_TIME_SPLIT = re.compile(r"\s+-\s+|\s+|T")

FORM_TIMESTAMP_FORMAT = "%Y/%m/%d - %H:%M"


def normalize_timestamp(text: str) -> str:
    """Rewrite ``YYYY/MM/DD - hh:mm`` style text into ISO ``YYYY-MM-DDThh:mm``.

    Every ``/`` becomes ``-`` and only the first whitespace separator is
    replaced by ``T``.
    """
    return _DATE_TIME_SEPARATOR.sub("T", text.replace("/", "-"), count=1)


def parse_timestamp(text: str) -> datetime:
    """Parse a form timestamp.

    Raises:
        CalculationValidationError: if the normalized text is not a date-time.
    """
    normalized = normalize_timestamp(text)
    try:
        return datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise CalculationValidationError(f"Invalid date-time: {text!r}") from exc


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` in the form's own ``YYYY/MM/DD - hh:mm`` shape."""
    return moment.strftime(FORM_TIMESTAMP_FORMAT)


def split_date_time(text: str) -> tuple[str, str]:
    """Split raw form text into its date and time parts, either may be empty."""
    parts = [part.strip() for part in _DATE_TIME_SPLIT.split(text.strip(), maxsplit=1)]
    parts += [""] * (2 - len(parts))
    return parts[0], parts[1]
