"""Exception types raised outside the validation engine.

Validation failures are never raised by the engine itself; they are
collected as :class:`toolspec.validate.errors.ValidationError` values.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toolspec.validate.errors import ValidationError


class ToolSpecError(Exception):
    """Base error for toolspec failures."""

    pass


class DocumentParseError(ToolSpecError):
    """A specification or input document could not be parsed."""

    def __init__(self, document: str, source: str, reason: str):
        """
        Initialize error with the document kind and where it came from.

        Args:
            document: Kind of document ("specification", "inputs", "citation")
            source: File path or "<string>" for in-memory documents
            reason: Short description of what went wrong
        """
        self.document = document
        self.source = source
        self.reason = reason
        super().__init__(f"Could not parse {document} document {source}: {reason}")


class ToolNotFoundError(ToolSpecError):
    """Tool name is not present in a document."""

    def __init__(self, tool_name: str, document: str):
        self.tool_name = tool_name
        self.document = document
        super().__init__(
            f"tool {tool_name} was not found in the given {document} file"
        )


class InputValidationError(ToolSpecError):
    """Tool inputs failed validation."""

    def __init__(self, tool_name: str, errors: list["ValidationError"]):
        self.tool_name = tool_name
        self.errors = errors
        super().__init__(
            f"{len(errors)} validation error(s) for tool {tool_name}: "
            + "; ".join(str(error) for error in errors)
        )
