"""Pytest configuration and fixtures."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from toolspec.loader import read_tool_spec
from toolspec.models import DataSpec, ParameterSpec, ToolSpec

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Undo configure_logging: structlog defaults, root level and handlers."""
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(level)
    # basicConfig installs a plain StreamHandler, pytest's own are subclasses
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture
def valid_dir() -> Path:
    """Directory holding a spec and inputs that validate cleanly."""
    return FIXTURES_DIR / "valid"


@pytest.fixture
def invalid_dir() -> Path:
    """Directory holding a spec and inputs with one error per parameter."""
    return FIXTURES_DIR / "invalid"


@pytest.fixture
def foobar_spec(valid_dir: Path) -> ToolSpec:
    """The foobar tool spec loaded from the fixture document."""
    return read_tool_spec(valid_dir / "tool.yml").get_tool("foobar")


@pytest.fixture
def simple_spec() -> ToolSpec:
    """Small hand-built tool spec covering required, optional and default."""
    return ToolSpec(
        name="simple",
        parameters={
            "count": ParameterSpec(name="count", type="integer", min=0, max=10),
            "label": ParameterSpec(name="label", type="string", optional=True),
            "mode": ParameterSpec(
                name="mode", type="enum", values=("fast", "slow"), default="fast"
            ),
        },
        data={
            "table": DataSpec(path="/in/table.csv", extensions=("csv",)),
        },
    )
