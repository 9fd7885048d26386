"""CLI smoke tests."""

from click.testing import CliRunner
from schema_algebra.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("keys", "pick", "omit", "pick-by-value", "omit-by-value", "deep", "merge"):
        assert command in result.output
