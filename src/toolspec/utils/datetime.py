"""RFC 3339 format checks for datetime, date and time parameters.

Python's ``fromisoformat`` accepts far more than RFC 3339 (week dates,
ordinal dates, missing separators), so the shape of the string is matched
first and only then handed to the stdlib parser for range checks such as
month 13 or hour 25.

Accepted forms per parameter type:
- datetime: full date-time, e.g. "2024-12-15T10:30:00Z"
- date: full-date ("2024-12-15") or a full date-time
- time: partial-time or full-time ("10:30:00", "10:30:00+02:00") or a
  full date-time
"""

import re
from datetime import date, datetime, time, timezone

__all__ = ["is_valid_datetime_format", "parse_datetime"]

_DATE = r"\d{4}-\d{2}-\d{2}"
_TIME = r"\d{2}:\d{2}:\d{2}(?:\.\d+)?"
_OFFSET = r"(?:[Zz]|[+-]\d{2}:\d{2})"

DATE_TIME_PATTERN = re.compile(rf"^{_DATE}[Tt]{_TIME}{_OFFSET}$")
FULL_DATE_PATTERN = re.compile(rf"^{_DATE}$")
TIME_PATTERN = re.compile(rf"^{_TIME}{_OFFSET}?$")


def _normalize(value: str) -> str:
    # fromisoformat only learned "Z" in 3.11 and never accepts lowercase t/z
    value = value.replace("t", "T", 1) if "t" in value else value
    if value[-1:] in ("Z", "z"):
        value = value[:-1] + "+00:00"
    return value


def parse_datetime(value: str) -> datetime:
    """Parse an RFC 3339 date-time into a timezone-aware datetime.

    Args:
        value: RFC 3339 date-time string (e.g., "2024-12-15T10:30:00Z")

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If value is not a valid RFC 3339 date-time.

    Examples:
        >>> parse_datetime("2024-12-15T10:30:00Z")
        datetime.datetime(2024, 12, 15, 10, 30, tzinfo=datetime.timezone.utc)
    """
    if not DATE_TIME_PATTERN.match(value):
        raise ValueError(f"Not an RFC 3339 date-time: {value!r}")
    try:
        dt = datetime.fromisoformat(_normalize(value))
    except ValueError as e:
        raise ValueError(f"Cannot parse RFC 3339 date-time: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _is_valid_date(value: str) -> bool:
    if not FULL_DATE_PATTERN.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def _is_valid_time(value: str) -> bool:
    if not TIME_PATTERN.match(value):
        return False
    try:
        time.fromisoformat(_normalize(value))
    except ValueError:
        return False
    return True


def is_valid_datetime_format(value: str, kind: str = "datetime") -> bool:
    """Check whether a string matches the RFC 3339 form for a parameter type.

    Args:
        value: String to check
        kind: One of "datetime", "date" or "time"

    Returns:
        True if value is valid for the given kind, False otherwise.
        Unknown kinds are checked as "datetime".

    Examples:
        >>> is_valid_datetime_format("2024-12-15T10:30:00+00:00")
        True
        >>> is_valid_datetime_format("2024-12-15")
        False
        >>> is_valid_datetime_format("2024-12-15", kind="date")
        True
        >>> is_valid_datetime_format("10:30:00", kind="time")
        True
    """
    try:
        parse_datetime(value)
    except ValueError:
        pass
    else:
        return True

    if kind == "date":
        return _is_valid_date(value)
    if kind == "time":
        return _is_valid_time(value)
    return False
