"""toolspec list and show commands."""

import json
from pathlib import Path

import click

from toolspec.cli.validate import DocumentError, load_spec_file
from toolspec.errors import ToolSpecError

_SPEC_OPTION = click.option(
    "--spec",
    "spec_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Tool specification (YAML). Defaults to TOOLSPEC_SPEC_FILE.",
)


@click.command("list")
@_SPEC_OPTION
def list_cmd(spec_path: Path | None) -> None:
    """List the tools declared in a specification."""
    spec_file = load_spec_file(spec_path)
    if not spec_file.tools:
        click.echo("No tools declared")
        return

    for name in sorted(spec_file.tools):
        title = spec_file.tools[name].title
        click.echo(f"{name}: {title}" if title else name)


@click.command()
@click.argument("tool_name")
@_SPEC_OPTION
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
def show(tool_name: str, spec_path: Path | None, output_format: str) -> None:
    """Show the parameters and datasets of one tool.

    TOOL_NAME is the key of the tool in the specification. With
    ``--format json`` the tool is printed as it was decoded, citation
    included.
    """
    spec_file = load_spec_file(spec_path)
    try:
        tool = spec_file.get_tool(tool_name)
    except ToolSpecError as e:
        raise DocumentError(str(e))

    if output_format == "json":
        # CITATION.cff dates decode to datetime.date
        click.echo(json.dumps(tool.to_dict(), indent=2, default=str))
        return

    click.echo(f"=== {tool.name} ===")
    if tool.title:
        click.echo(tool.title)
    if tool.description:
        click.echo(tool.description.strip())
    click.echo()

    click.echo("Parameters:")
    if not tool.parameters:
        click.echo("  (none)")
    for name, param in sorted(tool.parameters.items()):
        type_name = f"[]{param.type}" if param.is_array else param.type
        flags = []
        if param.is_required:
            flags.append("required")
        if param.default is not None:
            flags.append(f"default={param.default!r}")
        if param.min is not None:
            flags.append(f"min={param.min:g}")
        if param.max is not None:
            flags.append(f"max={param.max:g}")
        if param.values:
            flags.append(f"values={', '.join(param.values)}")
        suffix = f" ({'; '.join(flags)})" if flags else ""
        click.echo(f"  {name}: {type_name}{suffix}")
    click.echo()

    click.echo("Data:")
    if not tool.data:
        click.echo("  (none)")
    for name, data in sorted(tool.data.items()):
        extensions = ", ".join(data.extensions) or "any extension"
        click.echo(f"  {name}: {extensions}")
