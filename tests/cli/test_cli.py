"""Tests for the toolspec CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

import toolspec.config
from toolspec import __version__
from toolspec.cli.main import cli
from toolspec.config import ToolSpecSettings


@pytest.fixture
def cli_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, valid_dir: Path
) -> ToolSpecSettings:
    """Point settings at the valid fixtures and keep logs quiet."""
    monkeypatch.delenv("TOOL_RUN", raising=False)
    new_settings = ToolSpecSettings(
        spec_file=valid_dir / "tool.yml",
        input_file=valid_dir / "inputs.json",
        citation_file=tmp_path / "CITATION.cff",
        log_level="ERROR",
    )
    monkeypatch.setattr(toolspec.config, "settings", new_settings)
    return new_settings


class TestCli:
    """Tests for the cli group."""

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("validate", "list", "show"):
            assert command in result.output


class TestValidate:
    """Tests for toolspec validate command."""

    def test_valid_inputs(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["validate", "--tool", "foobar"])
        assert result.exit_code == 0
        assert "Inputs for tool foobar are valid" in result.output

    def test_invalid_inputs(self, cli_env: ToolSpecSettings, invalid_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "validate",
                "--spec", str(invalid_dir / "tool.yml"),
                "--inputs", str(invalid_dir / "inputs.json"),
                "--tool", "foobar",
            ],
        )
        assert result.exit_code == 1
        assert "[parameters] out-of-range: foo_float" in result.output
        assert "[data] required: foo_any" in result.output
        assert "8 error(s) found for tool foobar" in result.output
        assert "extra_param" not in result.output

    def test_strict(self, cli_env: ToolSpecSettings, invalid_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "validate",
                "--spec", str(invalid_dir / "tool.yml"),
                "--inputs", str(invalid_dir / "inputs.json"),
                "--tool", "foobar",
                "--strict",
            ],
        )
        assert result.exit_code == 1
        assert "not-allowed: extra_param" in result.output

    def test_strict_from_settings(
        self,
        cli_env: ToolSpecSettings,
        invalid_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(
            toolspec.config,
            "settings",
            cli_env.model_copy(
                update={
                    "fail_on_extra": True,
                    "spec_file": invalid_dir / "tool.yml",
                    "input_file": invalid_dir / "inputs.json",
                }
            ),
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["validate", "--tool", "foobar"])
        assert "not-allowed: extra_param" in result.output

        result = runner.invoke(cli, ["validate", "--tool", "foobar", "--no-strict"])
        assert "extra_param" not in result.output

    def test_json_output(self, cli_env: ToolSpecSettings, invalid_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "validate",
                "--spec", str(invalid_dir / "tool.yml"),
                "--inputs", str(invalid_dir / "inputs.json"),
                "--tool", "foobar",
                "--format", "json",
            ],
        )
        assert result.exit_code == 1
        records = json.loads(result.output)
        assert len(records) == 8
        assert set(records[0]) == {"field", "name", "type", "expected", "actual", "message"}

    def test_json_output_valid(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["validate", "--tool", "foobar", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == []

    def test_tool_from_settings(
        self, cli_env: ToolSpecSettings, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            toolspec.config,
            "settings",
            cli_env.model_copy(update={"tool_name": "foobar"}),
        )
        runner = CliRunner()
        result = runner.invoke(cli, ["validate"])
        assert result.exit_code == 0

    def test_no_tool_selected(self, cli_env: ToolSpecSettings) -> None:
        """The fixture spec declares two tools, so a name is needed."""
        runner = CliRunner()
        result = runner.invoke(cli, ["validate"])
        assert result.exit_code == 2
        assert "No tool selected" in result.output
        assert "foobar, other" in result.output

    def test_single_tool_needs_no_name(
        self, cli_env: ToolSpecSettings, tmp_path: Path
    ) -> None:
        spec = tmp_path / "tool.yml"
        spec.write_text("tools:\n  solo:\n    parameters:\n      n:\n        type: integer\n")
        inputs = tmp_path / "inputs.json"
        inputs.write_text('{"solo": {"parameters": {"n": 1}}}')
        runner = CliRunner()
        result = runner.invoke(
            cli, ["validate", "--spec", str(spec), "--inputs", str(inputs)]
        )
        assert result.exit_code == 0
        assert "Inputs for tool solo are valid" in result.output

    def test_unknown_tool(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["validate", "--tool", "missing"])
        assert result.exit_code == 2
        assert "tool missing was not found" in result.output

    def test_tool_missing_from_inputs(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["validate", "--tool", "other"])
        assert result.exit_code == 2
        assert "not found in the given inputs file" in result.output

    def test_malformed_inputs(self, cli_env: ToolSpecSettings, tmp_path: Path) -> None:
        inputs = tmp_path / "inputs.json"
        inputs.write_text("{not json")
        runner = CliRunner()
        result = runner.invoke(
            cli, ["validate", "--tool", "foobar", "--inputs", str(inputs)]
        )
        assert result.exit_code == 2
        assert "Could not parse inputs document" in result.output

    def test_missing_spec(self, cli_env: ToolSpecSettings, tmp_path: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["validate", "--spec", str(tmp_path / "missing.yml")]
        )
        assert result.exit_code == 2
        assert "Could not parse specification document" in result.output


class TestList:
    """Tests for toolspec list command."""

    def test_list(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["list"])
        assert result.exit_code == 0
        assert "foobar: Foobar" in result.output
        assert "other: Other tool" in result.output

    def test_list_empty(self, cli_env: ToolSpecSettings, tmp_path: Path) -> None:
        spec = tmp_path / "tool.yml"
        spec.write_text("tools: {}\n")
        runner = CliRunner()
        result = runner.invoke(cli, ["list", "--spec", str(spec)])
        assert result.exit_code == 0
        assert "No tools declared" in result.output


class TestShow:
    """Tests for toolspec show command."""

    def test_show(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "foobar"])
        assert result.exit_code == 0
        assert "=== foobar ===" in result.output
        assert "foo_int: integer (required; min=0; max=10)" in result.output
        assert "foo_array: []integer (required)" in result.output
        assert "foo_bool: boolean (default=False)" in result.output
        assert "foo_enum: enum (required; values=apple, banana)" in result.output
        assert "foo_optional: string" in result.output
        assert "foo_archive: .tar.gz, .zip" in result.output
        assert "foo_any: any extension" in result.output

    def test_show_without_parameters(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "other"])
        assert result.exit_code == 0
        assert "(none)" in result.output

    def test_show_unknown(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "missing"])
        assert result.exit_code == 2
        assert "tool missing was not found" in result.output

    def test_show_json(self, cli_env: ToolSpecSettings) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["show", "foobar", "--format", "json"])
        assert result.exit_code == 0
        tool = json.loads(result.output)
        assert tool["name"] == "foobar"
        assert tool["parameters"]["foo_int"] == {
            "name": "foo_int",
            "type": "integer",
            "min": 0.0,
            "max": 10.0,
        }
        assert tool["data"]["foo_archive"]["extension"] == [".tar.gz", ".zip"]
        # CITATION.cff next to tool.yml is picked up
        assert tool["citation"]["title"] == "Foobar"
