"""Input validation: parameters and datasets of one tool invocation."""

from toolspec.errors import InputValidationError
from toolspec.logging import get_logger
from toolspec.models import ToolInput, ToolSpec
from toolspec.validate.data import validate_data
from toolspec.validate.errors import ValidationError
from toolspec.validate.parameter import validate_parameters

logger = get_logger(__name__)

__all__ = ["validate_inputs", "ensure_valid_inputs"]


def validate_inputs(
    spec: ToolSpec,
    tool_input: ToolInput,
    *,
    fail_on_extra: bool = False,
) -> tuple[bool, list[ValidationError]]:
    """Validate the parameters and datasets of one invocation.

    Parameter errors are reported before data errors.

    Args:
        spec: Tool spec to validate against
        tool_input: Parameters and datasets of the invocation
        fail_on_extra: Reject parameter names the tool does not declare

    Returns:
        Tuple of (has_errors, errors)
    """
    _, errors = validate_parameters(spec, tool_input.parameters, fail_on_extra)
    _, data_errors = validate_data(spec, tool_input.datasets)
    errors.extend(data_errors)

    logger.debug(
        "validation.completed",
        tool=spec.name,
        error_count=len(errors),
    )
    return bool(errors), errors


def ensure_valid_inputs(
    spec: ToolSpec,
    tool_input: ToolInput,
    *,
    fail_on_extra: bool = False,
) -> None:
    """Validate one invocation and raise if anything is wrong.

    Raises:
        InputValidationError: If validation produced any errors
    """
    has_errors, errors = validate_inputs(spec, tool_input, fail_on_extra=fail_on_extra)
    if has_errors:
        raise InputValidationError(spec.name, errors)
