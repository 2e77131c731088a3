"""toolspec utility modules.

Provides centralized utilities for:
- datetime: RFC 3339 checks for datetime/date/time parameters
- numeric: precision-safe integer coercion
"""

from toolspec.utils.datetime import is_valid_datetime_format, parse_datetime
from toolspec.utils.numeric import is_whole_number, safe_int

__all__ = [
    "is_valid_datetime_format",
    "parse_datetime",
    "is_whole_number",
    "safe_int",
]
