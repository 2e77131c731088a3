"""Parameter validation.

``validate_parameter`` checks one value against one ParameterSpec and
stops at the first violated rule. ``validate_parameters`` checks a whole
parameter map and collects every error.
"""

from collections.abc import Mapping
from typing import Any

from toolspec.logging import get_logger
from toolspec.models import ParameterSpec, ToolSpec
from toolspec.utils.datetime import is_valid_datetime_format
from toolspec.utils.numeric import safe_int
from toolspec.validate.errors import ErrorKind, Field, ValidationError, format_choices
from toolspec.values import (
    DATETIME_TYPES,
    NUMERIC_TYPES,
    ParameterType,
    ValueKind,
    accepted_kinds,
    classify,
    parse_type,
    type_label,
)

logger = get_logger(__name__)

__all__ = ["validate_parameter", "validate_parameters"]


def _error(
    spec: ParameterSpec,
    kind: ErrorKind,
    expected: str,
    actual: str,
    message: str,
) -> ValidationError:
    return ValidationError(
        field=Field.PARAMETERS,
        name=spec.name,
        kind=kind,
        expected=expected,
        actual=actual,
        message=message,
    )


def _format_number(value: int | float) -> str:
    try:
        return f"{value:.2f}"
    except OverflowError:
        # ints beyond float range, JSON decodes them exactly
        return str(value)


def _check_range(spec: ParameterSpec, value: int | float) -> ValidationError | None:
    # No float() conversion: int/float comparisons are exact for any size.
    # Negated comparisons so NaN fails whichever bound is set.
    if spec.min is not None and not value >= spec.min:
        return _error(
            spec,
            ErrorKind.OUT_OF_RANGE,
            expected=f">= {spec.min:.2f}",
            actual=_format_number(value),
            message=f"{spec.name} must be >= {spec.min:.2f}",
        )
    if spec.max is not None and not value <= spec.max:
        return _error(
            spec,
            ErrorKind.OUT_OF_RANGE,
            expected=f"<= {spec.max:.2f}",
            actual=_format_number(value),
            message=f"{spec.name} must be <= {spec.max:.2f}",
        )
    return None


def validate_parameter(spec: ParameterSpec, value: Any) -> ValidationError | None:
    """Validate a single value against its parameter spec.

    Checks run in a fixed order and the first failure is returned:
    array-ness, nullability, integer coercion, type, range, enum
    membership and datetime format. Array values are validated element by
    element and the first failing element wins.

    Args:
        spec: Parameter spec to validate against
        value: Decoded input value

    Returns:
        None if the value is valid, otherwise the first ValidationError
    """
    param_type = parse_type(spec.type)

    if spec.is_array:
        kind = classify(value)
        if kind is not ValueKind.ARRAY:
            return _error(
                spec,
                ErrorKind.NOT_ARRAY,
                expected=f"[]{spec.type}",
                actual=kind.value,
                message=f"expected {spec.name} to be an array of {spec.type}",
            )
        element_spec = spec.element_spec()
        for element in value:
            error = validate_parameter(element_spec, element)
            if error is not None:
                return error
        return None

    if value is None:
        if spec.optional:
            return None
        return _error(
            spec,
            ErrorKind.REQUIRED,
            expected="not nil",
            actual="nil",
            message=f"{spec.name} is required",
        )

    # JSON has a single number type, so 4.0 may stand for the integer 4
    if param_type is ParameterType.INTEGER and classify(value) is ValueKind.FLOAT:
        try:
            value = safe_int(value)
        except ValueError:
            return _error(
                spec,
                ErrorKind.WRONG_TYPE,
                expected="integer",
                actual="float",
                message=f"expected {spec.name} to be an integer",
            )

    kind = classify(value)
    if kind not in accepted_kinds(param_type):
        expected = type_label(param_type)
        return _error(
            spec,
            ErrorKind.WRONG_TYPE,
            expected=expected,
            actual=kind.value,
            message=f"expected {spec.name} to be a {expected}",
        )

    if param_type in NUMERIC_TYPES:
        return _check_range(spec, value)

    if param_type is ParameterType.ENUM:
        if value not in spec.values:
            choices = format_choices(spec.values)
            return _error(
                spec,
                ErrorKind.NOT_IN_ENUM,
                expected=f"one of {choices}",
                actual=value,
                message=f"{spec.name} must be one of {choices}",
            )
        return None

    if param_type in DATETIME_TYPES and kind is ValueKind.STRING:
        if not is_valid_datetime_format(value, param_type.value):
            return _error(
                spec,
                ErrorKind.INVALID_DATETIME,
                expected=f"a valid RFC 3339 {param_type.value} string",
                actual=value,
                message=f"{spec.name} must be a valid RFC 3339 {param_type.value} string",
            )

    return None


def validate_parameters(
    spec: ToolSpec,
    inputs: Mapping[str, Any],
    fail_on_extra: bool = False,
) -> tuple[bool, list[ValidationError]]:
    """Validate a full parameter map against a tool spec.

    Every input value with a declared spec is validated. Undeclared names
    are reported as not-allowed only when ``fail_on_extra`` is set.
    Declared parameters missing from the inputs are reported as required
    unless they are optional or have a default. Defaults are not applied
    to ``inputs``.

    Args:
        spec: Tool spec holding the declared parameters
        inputs: Parameter name to decoded value
        fail_on_extra: Reject parameter names the tool does not declare

    Returns:
        Tuple of (has_errors, errors) with errors sorted by name and kind
    """
    errors: list[ValidationError] = []

    for name, value in inputs.items():
        param_spec = spec.parameters.get(name)
        if param_spec is None:
            if fail_on_extra:
                allowed = format_choices(sorted(spec.parameters))
                errors.append(
                    ValidationError(
                        field=Field.PARAMETERS,
                        name=name,
                        kind=ErrorKind.NOT_ALLOWED,
                        expected=f"one of {allowed}",
                        actual=name,
                        message=(
                            f"parameter {name} is not allowed, "
                            f"allowed parameters are: {allowed}"
                        ),
                    )
                )
            continue

        error = validate_parameter(param_spec, value)
        if error is not None:
            errors.append(error)

    for name, param_spec in spec.parameters.items():
        if name not in inputs and param_spec.is_required:
            errors.append(
                ValidationError(
                    field=Field.PARAMETERS,
                    name=name,
                    kind=ErrorKind.REQUIRED,
                    expected="not null",
                    actual="null",
                    message=f"{name} is a required parameter but was not provided",
                )
            )

    errors.sort(key=ValidationError.sort_key)
    logger.debug(
        "validation.parameters.completed",
        tool=spec.name,
        checked=len(inputs),
        error_count=len(errors),
    )
    return bool(errors), errors
