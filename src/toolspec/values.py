"""Value model: logical parameter types and runtime value kinds.

Input values arrive weakly typed (decoded JSON or YAML). ``classify`` maps
any such value onto the closed ``ValueKind`` set, and ``accepted_kinds``
maps a declared parameter type onto the kinds it accepts.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Kind of a runtime value, as reported in ``actual`` fields."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    DATETIME = "datetime"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"


class ParameterType(str, Enum):
    """Logical parameter types recognised in specification documents."""

    STRING = "string"
    ASSET = "asset"
    ENUM = "enum"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    TIME = "time"


NUMERIC_TYPES = frozenset({ParameterType.INTEGER, ParameterType.FLOAT})
DATETIME_TYPES = frozenset(
    {ParameterType.DATETIME, ParameterType.DATE, ParameterType.TIME}
)

# Label used in ``expected`` when a value has the wrong kind
TYPE_LABELS: dict[ParameterType, str] = {
    ParameterType.STRING: "string",
    ParameterType.ASSET: "string",
    ParameterType.ENUM: "string",
    ParameterType.INTEGER: "integer",
    ParameterType.FLOAT: "float",
    ParameterType.BOOLEAN: "boolean",
    ParameterType.DATETIME: "datetime",
    ParameterType.DATE: "datetime",
    ParameterType.TIME: "datetime",
}

_ACCEPTED_KINDS: dict[ParameterType, frozenset[ValueKind]] = {
    ParameterType.STRING: frozenset({ValueKind.STRING}),
    ParameterType.ASSET: frozenset({ValueKind.STRING}),
    ParameterType.ENUM: frozenset({ValueKind.STRING}),
    ParameterType.INTEGER: frozenset({ValueKind.INTEGER}),
    ParameterType.FLOAT: frozenset({ValueKind.INTEGER, ValueKind.FLOAT}),
    ParameterType.BOOLEAN: frozenset({ValueKind.BOOLEAN}),
    ParameterType.DATETIME: frozenset({ValueKind.STRING, ValueKind.DATETIME}),
    ParameterType.DATE: frozenset({ValueKind.STRING, ValueKind.DATETIME}),
    ParameterType.TIME: frozenset({ValueKind.STRING, ValueKind.DATETIME}),
}


def parse_type(type_tag: str) -> ParameterType | None:
    """Map a type tag from a specification document to a ParameterType.

    Returns None for tags outside the fixed set.
    """
    try:
        return ParameterType(type_tag)
    except ValueError:
        return None


def classify(value: Any) -> ValueKind:
    """Classify a runtime value.

    Examples:
        >>> classify(True)
        <ValueKind.BOOLEAN: 'boolean'>
        >>> classify(4)
        <ValueKind.INTEGER: 'integer'>
        >>> classify([1, 2])
        <ValueKind.ARRAY: 'array'>
    """
    # bool before int: True is an int in Python
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (datetime, date, time)):
        return ValueKind.DATETIME
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    return ValueKind.UNKNOWN


def accepted_kinds(param_type: ParameterType | None) -> frozenset[ValueKind]:
    """Value kinds accepted by a parameter type; unknown types accept none."""
    if param_type is None:
        return frozenset()
    return _ACCEPTED_KINDS[param_type]


def type_label(param_type: ParameterType | None) -> str:
    """Human readable type name for ``expected`` fields."""
    if param_type is None:
        return ValueKind.UNKNOWN.value
    return TYPE_LABELS[param_type]
