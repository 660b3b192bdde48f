"""CLI smoke tests."""

from avsc_schema_store.cli import cli
from click.testing import CliRunner


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "resolve" in result.output
    assert "load-all" in result.output
