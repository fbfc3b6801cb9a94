"""Smoke tests for the CLI entrypoint."""

from click.testing import CliRunner

from orderly.cli import cli


def test_cli_help_displays_commands() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "Orderly moves new downloads" in result.output
    assert "run" in result.output
    assert "config" in result.output
