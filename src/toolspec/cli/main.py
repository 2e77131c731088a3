"""toolspec CLI main entry point.

This module provides the main CLI interface for toolspec.
"""

import click

from toolspec import __version__, config
from toolspec.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="toolspec")
@click.option("--log-level", default=None, help="Override TOOLSPEC_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """toolspec - validate tool inputs against tool specifications."""
    configure_logging(
        log_level or config.settings.log_level,
        config.settings.log_format,
    )


# Import and register subcommands
from toolspec.cli.inspect import list_cmd, show  # noqa: E402
from toolspec.cli.validate import validate  # noqa: E402

cli.add_command(validate)
cli.add_command(list_cmd)
cli.add_command(show)
