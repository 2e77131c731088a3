"""Loading specification, input and citation documents.

The specification document is YAML with a top-level ``tools`` mapping; the
input document is JSON mapping tool names to ``{"parameters", "data"}``.
Decoding problems surface as DocumentParseError, never as validation
errors.
"""

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from toolspec.errors import DocumentParseError
from toolspec.logging import get_logger
from toolspec.models import InputFile, SpecFile, ToolInput, ToolSpec

logger = get_logger(__name__)

__all__ = [
    "load_tool_spec",
    "load_inputs",
    "load_citation",
    "read_tool_spec",
    "read_inputs",
    "read_citation",
]

CITATION_FILENAME = "CITATION.cff"

# Raised by the model constructors on structurally wrong entries
_ENTRY_ERRORS = (AttributeError, KeyError, TypeError, ValueError)


def _decode(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8")
    return raw


def load_tool_spec(raw: str | bytes, source: str = "<string>") -> SpecFile:
    """Parse a YAML specification document.

    Tool names and parameter names are filled in from their mapping keys.

    Args:
        raw: Document contents
        source: Where the document came from, used in error messages

    Returns:
        Parsed SpecFile

    Raises:
        DocumentParseError: If the YAML is malformed or has the wrong shape
    """
    try:
        document = yaml.safe_load(_decode(raw))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise DocumentParseError("specification", source, str(e)) from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise DocumentParseError(
            "specification", source, "top level must be a mapping"
        )

    tools = document.get("tools") or {}
    if not isinstance(tools, dict):
        raise DocumentParseError("specification", source, "tools must be a mapping")

    specs: dict[str, ToolSpec] = {}
    for name, entry in tools.items():
        try:
            specs[str(name)] = ToolSpec.from_dict(str(name), entry or {})
        except _ENTRY_ERRORS as e:
            raise DocumentParseError(
                "specification", source, f"tool {name}: {e}"
            ) from e

    logger.debug("spec.parsed", source=source, tools=len(specs))
    return SpecFile(tools=specs)


def load_inputs(raw: str | bytes, source: str = "<string>") -> InputFile:
    """Parse a JSON input document.

    Args:
        raw: Document contents
        source: Where the document came from, used in error messages

    Returns:
        Parsed InputFile

    Raises:
        DocumentParseError: If the JSON is malformed or has the wrong shape
    """
    try:
        document = json.loads(_decode(raw))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentParseError("inputs", source, str(e)) from e

    if not isinstance(document, dict):
        raise DocumentParseError("inputs", source, "top level must be an object")

    inputs: dict[str, ToolInput] = {}
    for name, entry in document.items():
        try:
            inputs[name] = ToolInput.from_dict(entry or {})
        except _ENTRY_ERRORS as e:
            raise DocumentParseError("inputs", source, f"tool {name}: {e}") from e

    logger.debug("inputs.parsed", source=source, tools=len(inputs))
    return InputFile(tools=inputs)


def load_citation(raw: str | bytes, source: str = "<string>") -> dict[str, Any]:
    """Parse a CITATION.cff document into a plain mapping.

    Raises:
        DocumentParseError: If the YAML is malformed or not a mapping
    """
    try:
        document = yaml.safe_load(_decode(raw))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise DocumentParseError("citation", source, str(e)) from e

    if not isinstance(document, dict):
        raise DocumentParseError("citation", source, "top level must be a mapping")
    return document


def _read(path: Path, document: str) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise DocumentParseError(document, str(path), e.strerror or str(e)) from e


def read_citation(path: str | Path) -> dict[str, Any]:
    """Read and parse a CITATION.cff file."""
    path = Path(path)
    return load_citation(_read(path, "citation"), source=str(path))


def read_tool_spec(
    path: str | Path,
    citation_path: str | Path | None = None,
) -> SpecFile:
    """Read and parse a specification file.

    If ``citation_path`` is given, or a CITATION.cff sits next to the spec
    file, the citation is attached to every tool.

    Args:
        path: Path to the YAML specification
        citation_path: Optional explicit CITATION.cff path

    Returns:
        Parsed SpecFile

    Raises:
        DocumentParseError: If a file cannot be read or parsed
    """
    path = Path(path)
    spec_file = load_tool_spec(_read(path, "specification"), source=str(path))

    if citation_path is None:
        candidate = path.parent / CITATION_FILENAME
        citation_path = candidate if candidate.is_file() else None

    if citation_path is not None:
        citation = read_citation(citation_path)
        spec_file = SpecFile(
            tools={
                name: replace(tool, citation=citation)
                for name, tool in spec_file.tools.items()
            }
        )

    logger.info(
        "spec.loaded",
        path=str(path),
        tools=sorted(spec_file.tools),
        citation=citation_path is not None,
    )
    return spec_file


def read_inputs(path: str | Path) -> InputFile:
    """Read and parse an input file.

    Raises:
        DocumentParseError: If the file cannot be read or parsed
    """
    path = Path(path)
    input_file = load_inputs(_read(path, "inputs"), source=str(path))
    logger.info("inputs.loaded", path=str(path), tools=sorted(input_file.tools))
    return input_file
