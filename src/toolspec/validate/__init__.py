"""Validation engine for tool parameters and datasets."""

from toolspec.validate.data import validate_data
from toolspec.validate.errors import ErrorKind, Field, ValidationError
from toolspec.validate.inputs import ensure_valid_inputs, validate_inputs
from toolspec.validate.parameter import validate_parameter, validate_parameters

__all__ = [
    "ErrorKind",
    "Field",
    "ValidationError",
    "ensure_valid_inputs",
    "validate_data",
    "validate_inputs",
    "validate_parameter",
    "validate_parameters",
]
