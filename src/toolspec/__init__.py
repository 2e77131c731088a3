"""toolspec - validate tool invocations against declarative tool specifications."""

from toolspec.errors import (
    DocumentParseError,
    InputValidationError,
    ToolNotFoundError,
    ToolSpecError,
)
from toolspec.loader import load_inputs, load_tool_spec, read_inputs, read_tool_spec
from toolspec.models import (
    DataSpec,
    InputFile,
    ParameterSpec,
    SpecFile,
    ToolInput,
    ToolSpec,
)
from toolspec.validate import (
    ErrorKind,
    ValidationError,
    ensure_valid_inputs,
    validate_data,
    validate_inputs,
    validate_parameter,
    validate_parameters,
)

__version__ = "0.1.0"

__all__ = [
    "DataSpec",
    "DocumentParseError",
    "ErrorKind",
    "InputFile",
    "InputValidationError",
    "ParameterSpec",
    "SpecFile",
    "ToolInput",
    "ToolNotFoundError",
    "ToolSpec",
    "ToolSpecError",
    "ValidationError",
    "__version__",
    "ensure_valid_inputs",
    "load_inputs",
    "load_tool_spec",
    "read_inputs",
    "read_tool_spec",
    "validate_data",
    "validate_inputs",
    "validate_parameter",
    "validate_parameters",
]
