"""Data models for tool specifications and tool inputs.

All models are frozen dataclasses. They are built once by the loader (or
directly in code) and are treated as read-only by the validation engine.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from toolspec.errors import ToolNotFoundError

__all__ = [
    "ParameterSpec",
    "DataSpec",
    "ToolSpec",
    "ToolInput",
    "SpecFile",
    "InputFile",
    "normalize_extension",
]


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and make sure it starts with a dot.

    Examples:
        >>> normalize_extension("CSV")
        '.csv'
        >>> normalize_extension(".Tar.GZ")
        '.tar.gz'
    """
    extension = extension.strip().lower()
    if not extension.startswith("."):
        extension = "." + extension
    return extension


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected a number for range bound, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class ParameterSpec:
    """Declared contract for one tool parameter."""

    name: str
    type: str
    description: str = ""
    is_array: bool = False
    default: Any = None  # None means no default
    values: tuple[str, ...] = ()  # enum members, only used for type "enum"
    min: float | None = None
    max: float | None = None
    optional: bool = False

    @property
    def is_required(self) -> bool:
        """True if the parameter must be present in every invocation."""
        return not self.optional and self.default is None

    def element_spec(self) -> "ParameterSpec":
        """Spec used to validate the individual elements of an array."""
        return replace(self, is_array=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict using the document keys."""
        result: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.description:
            result["description"] = self.description
        if self.is_array:
            result["array"] = True
        if self.default is not None:
            result["default"] = self.default
        if self.values:
            result["values"] = list(self.values)
        if self.min is not None:
            result["min"] = self.min
        if self.max is not None:
            result["max"] = self.max
        if self.optional:
            result["optional"] = True
        return result

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "ParameterSpec":
        """Parse from a specification document entry.

        The map key always wins over any ``name`` inside the entry.
        """
        return cls(
            name=name,
            type=str(data.get("type") or ""),
            description=data.get("description") or "",
            is_array=bool(data.get("array", False)),
            default=data.get("default"),
            values=tuple(str(v) for v in data.get("values") or ()),
            min=_optional_float(data.get("min")),
            max=_optional_float(data.get("max")),
            optional=bool(data.get("optional", False)),
        )


@dataclass(frozen=True)
class DataSpec:
    """Declared contract for one dataset (input file)."""

    path: str = ""
    description: str = ""
    example: str = ""
    # Normalized to lowercase with a leading dot; empty accepts anything.
    # A bare string is taken as a single extension.
    extensions: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        extensions = self.extensions
        if isinstance(extensions, str):
            extensions = (extensions,)
        normalized = tuple(normalize_extension(ext) for ext in extensions)
        object.__setattr__(self, "extensions", normalized)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict using the document keys."""
        result: dict[str, Any] = {"path": self.path}
        if self.description:
            result["description"] = self.description
        if self.example:
            result["example"] = self.example
        if self.extensions:
            result["extension"] = list(self.extensions)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DataSpec":
        """Parse from a specification document entry.

        ``extension`` may be a single string or a list of strings.
        """
        raw = data.get("extension")
        if raw is None:
            extensions: tuple[str, ...] = ()
        elif isinstance(raw, str):
            extensions = (raw,)
        elif isinstance(raw, list):
            extensions = tuple(str(ext) for ext in raw)
        else:
            raise TypeError(
                f"extension must be a string or a list, got {type(raw).__name__}"
            )
        return cls(
            path=data.get("path") or "",
            description=data.get("description") or "",
            example=data.get("example") or "",
            extensions=extensions,
        )


@dataclass(frozen=True)
class ToolSpec:
    """Declarative contract for one tool's parameters and datasets."""

    name: str
    id: str = ""
    title: str = ""
    description: str = ""
    parameters: dict[str, ParameterSpec] = field(default_factory=dict)
    data: dict[str, DataSpec] = field(default_factory=dict)
    citation: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        result: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "description": self.description,
        }
        if self.parameters:
            result["parameters"] = {
                name: spec.to_dict() for name, spec in self.parameters.items()
            }
        if self.data:
            result["data"] = {name: spec.to_dict() for name, spec in self.data.items()}
        if self.citation is not None:
            result["citation"] = self.citation
        return result

    @classmethod
    def from_dict(cls, name: str, data: dict[str, Any]) -> "ToolSpec":
        """Parse from the entry of a tool in the specification document."""
        parameters = data.get("parameters") or {}
        datasets = data.get("data") or {}
        return cls(
            name=name,
            id=str(data.get("id") or ""),
            title=data.get("title") or "",
            description=data.get("description") or "",
            parameters={
                str(key): ParameterSpec.from_dict(str(key), value or {})
                for key, value in parameters.items()
            },
            data={
                str(key): DataSpec.from_dict(value or {})
                for key, value in datasets.items()
            },
        )


@dataclass(frozen=True)
class ToolInput:
    """Parameter values and dataset paths of one tool invocation."""

    parameters: dict[str, Any] = field(default_factory=dict)
    datasets: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ToolInput":
        """Parse from the entry of a tool in the input document."""
        parameters = data.get("parameters") or {}
        datasets = data.get("data") or {}
        if not isinstance(parameters, dict):
            raise TypeError("parameters must be an object")
        if not isinstance(datasets, dict):
            raise TypeError("data must be an object")
        for name, path in datasets.items():
            if not isinstance(path, str):
                raise TypeError(f"data entry {name} must be a string path")
        return cls(parameters=dict(parameters), datasets=dict(datasets))


@dataclass(frozen=True)
class SpecFile:
    """Decoded specification document: tool name to tool spec."""

    tools: dict[str, ToolSpec] = field(default_factory=dict)

    def get_tool(self, tool_name: str) -> ToolSpec:
        """Look up a tool by name.

        Raises:
            ToolNotFoundError: If the tool is not declared
        """
        try:
            return self.tools[tool_name]
        except KeyError:
            raise ToolNotFoundError(tool_name, "specification") from None


@dataclass(frozen=True)
class InputFile:
    """Decoded input document: tool name to tool input."""

    tools: dict[str, ToolInput] = field(default_factory=dict)

    def get_tool_input(self, tool_name: str) -> ToolInput:
        """Look up the inputs of a tool by name.

        Raises:
            ToolNotFoundError: If the document has no entry for the tool
        """
        try:
            return self.tools[tool_name]
        except KeyError:
            raise ToolNotFoundError(tool_name, "inputs") from None
