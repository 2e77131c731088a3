"""toolspec validate command."""

import json
from pathlib import Path

import click

from toolspec import config
from toolspec.errors import ToolSpecError
from toolspec.loader import read_inputs, read_tool_spec
from toolspec.logging import get_logger
from toolspec.models import SpecFile
from toolspec.validate import validate_inputs

logger = get_logger(__name__)


class DocumentError(click.ClickException):
    """A document could not be loaded or lacks the requested tool."""

    exit_code = 2


def load_spec_file(spec_path: Path | None) -> SpecFile:
    """Load the specification file, attaching the configured citation if present."""
    path = spec_path or config.settings.spec_file
    citation = config.settings.citation_file
    try:
        return read_tool_spec(path, citation if citation.is_file() else None)
    except ToolSpecError as e:
        raise DocumentError(str(e))


def resolve_tool_name(spec_file: SpecFile, tool_name: str | None) -> str:
    """Pick the tool to validate.

    An explicit name wins, then the configured name. A specification with
    a single tool needs no name at all.
    """
    name = tool_name or config.settings.tool_name
    if name:
        return name
    if len(spec_file.tools) == 1:
        return next(iter(spec_file.tools))
    raise click.UsageError(
        "No tool selected. Use --tool or set TOOL_RUN. "
        f"Available tools: {', '.join(sorted(spec_file.tools)) or '(none)'}"
    )


@click.command()
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Tool specification (YAML). Defaults to TOOLSPEC_SPEC_FILE.",
)
@click.option(
    "--inputs",
    "input_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Tool inputs (JSON). Defaults to TOOLSPEC_INPUT_FILE.",
)
@click.option("--tool", "tool_name", default=None, help="Tool to validate.")
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Reject parameters the tool does not declare.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def validate(
    spec_path: Path | None,
    input_path: Path | None,
    tool_name: str | None,
    strict: bool | None,
    output_format: str,
) -> None:
    """Validate the inputs of one tool against its specification.

    Exits with 1 if validation fails and with 2 if a document cannot be
    loaded or the tool is not declared.
    """
    spec_file = load_spec_file(spec_path)
    name = resolve_tool_name(spec_file, tool_name)
    fail_on_extra = config.settings.fail_on_extra if strict is None else strict

    try:
        tool_spec = spec_file.get_tool(name)
        tool_input = read_inputs(input_path or config.settings.input_file).get_tool_input(name)
    except ToolSpecError as e:
        raise DocumentError(str(e))

    has_errors, errors = validate_inputs(tool_spec, tool_input, fail_on_extra=fail_on_extra)
    logger.info("validate.finished", tool=name, error_count=len(errors))

    if output_format == "json":
        click.echo(json.dumps([error.to_dict() for error in errors], indent=2))
    elif has_errors:
        for error in errors:
            click.echo(f"[{error.field.value}] {error.kind.value}: {error}")
        click.echo("")
        click.echo(f"{len(errors)} error(s) found for tool {name}")
    else:
        click.echo(f"Inputs for tool {name} are valid")

    if has_errors:
        raise SystemExit(1)
