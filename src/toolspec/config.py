"""Configuration using pydantic-settings.

All settings can be overridden via environment variables with the
TOOLSPEC_ prefix, e.g. TOOLSPEC_LOG_LEVEL=DEBUG. Defaults follow the
tool container layout: the specification lives in /src and the inputs in
/in.
"""

from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["ToolSpecSettings", "settings"]


class ToolSpecSettings(BaseSettings):
    """Configuration for loading and validating tool inputs."""

    model_config = SettingsConfigDict(env_prefix="TOOLSPEC_", populate_by_name=True)

    # =========================================================================
    # Document locations
    # =========================================================================

    spec_file: Path = Field(
        default=Path("/src/tool.yml"),
        description="Path to the YAML tool specification",
    )

    input_file: Path = Field(
        default=Path("/in/inputs.json"),
        description="Path to the JSON tool inputs",
    )

    citation_file: Path = Field(
        default=Path("/src/CITATION.cff"),
        description="Path to the CITATION.cff attached to loaded tools, if present",
    )

    # =========================================================================
    # Validation
    # =========================================================================

    tool_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("TOOLSPEC_TOOL_NAME", "TOOL_RUN"),
        description=(
            "Name of the tool to validate. Falls back to TOOL_RUN, which tool "
            "runners set to the tool being started."
        ),
    )

    fail_on_extra: bool = Field(
        default=False,
        description="Reject parameters that the tool does not declare",
    )

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format",
    )


settings = ToolSpecSettings()
