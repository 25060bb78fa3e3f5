# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


from click.testing import CliRunner

from pathgc_lib import __version__, cli


def test_cli_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __version__


def test_cli_without_command_prints_help():
    runner = CliRunner()
    result = runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "prepare" in result.output
    assert "run" in result.output


def test_cli_subcommand_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "-h"])

    assert result.exit_code == 0
    assert "STEP_FILE" in result.output
