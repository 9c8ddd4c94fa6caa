"""ISO 8601 parsing and formatting for date and date-time wire fields."""

import re
from datetime import date, datetime

# datetime.fromisoformat before 3.11 only takes 3 or 6 fractional digits
_FRACTION = re.compile(r"\.(\d+)(?=$|[+-])")


def _normalize_fraction(value: str) -> str:
    return _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)


def parse_datetime(value: str) -> datetime:
    """Parse an ISO 8601 date-time with an explicit offset.

    Fractional seconds of any length are accepted and kept to microseconds.

    Raises:
        ValueError: If the string is not ISO 8601 or carries no offset
    """
    parsed = datetime.fromisoformat(_normalize_fraction(value.replace('Z', '+00:00')))
    if parsed.tzinfo is None:
        raise ValueError(f"date-time '{value}' has no UTC offset")
    return parsed


def format_datetime(value: datetime) -> str:
    """Format a date-time the way the API emits it (UTC as 'Z')."""
    text = value.isoformat()
    if text.endswith('+00:00'):
        text = text[:-6] + 'Z'
    return text


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD calendar date."""
    if len(value) != 10:
        raise ValueError(f"date '{value}' is not YYYY-MM-DD")
    return date.fromisoformat(value)


def format_date(value: date) -> str:
    return value.isoformat()
