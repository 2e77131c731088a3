"""Structured validation diagnostics.

A ``ValidationError`` is a value, not an exception: the engine collects
zero or more of them per call. ``to_dict`` produces the flat wire record
consumers depend on; its keys must not change.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Field(str, Enum):
    """Section of the tool input an error refers to."""

    PARAMETERS = "parameters"
    DATA = "data"


class ErrorKind(str, Enum):
    """Kind of rule violation."""

    REQUIRED = "required"
    WRONG_TYPE = "wrong-type"
    NOT_ARRAY = "not-array"
    OUT_OF_RANGE = "out-of-range"
    NOT_IN_ENUM = "not-in-enum"
    INVALID_DATETIME = "invalid-datetime"
    NOT_ALLOWED = "not-allowed"


@dataclass(frozen=True)
class ValidationError:
    """One rule violation for one parameter or dataset."""

    field: Field
    name: str
    kind: ErrorKind
    expected: str
    actual: str
    message: str

    def __str__(self) -> str:
        return (
            f"{self.name}: {self.message} "
            f"(expected {self.expected}, got {self.actual})"
        )

    def sort_key(self) -> tuple[str, str, str]:
        """Deterministic ordering: field, then name, then kind."""
        return (self.field.value, self.name, self.kind.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the flat wire record."""
        return {
            "field": self.field.value,
            "name": self.name,
            "type": self.kind.value,
            "expected": self.expected,
            "actual": self.actual,
            "message": self.message,
        }


def format_choices(choices: Any) -> str:
    """Render a list of options for ``expected`` fields and messages.

    Examples:
        >>> format_choices([".csv", ".txt"])
        '[.csv, .txt]'
    """
    return "[" + ", ".join(str(choice) for choice in choices) + "]"
