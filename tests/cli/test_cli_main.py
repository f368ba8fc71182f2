"""Tests for the main CLI group."""

from quarto_devcontainer.cli.main import cli


def test_cli_help(cli_runner):
    result = cli_runner.invoke(cli, ['--help'])

    assert result.exit_code == 0
    assert "use" in result.output


def test_use_lists_devcontainer(cli_runner):
    result = cli_runner.invoke(cli, ['use', '--help'])

    assert result.exit_code == 0
    assert "devcontainer" in result.output
