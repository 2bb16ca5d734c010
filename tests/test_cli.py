"""Command-line tests."""

from typer.testing import CliRunner

from pytimetransform.cli import cli

runner = CliRunner()


def test_timestamp_to_string():
    result = runner.invoke(cli(), ["1609459200"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "2021-01-01 00:00:00"


def test_string_to_timestamp():
    result = runner.invoke(cli(), ["2021-01-01 00:00:00"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1609459200000"


def test_utc_option():
    result = runner.invoke(cli(), ["--utc", "1609459200123"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "2021-01-01 00:00:00"


def test_failure_exits_nonzero():
    result = runner.invoke(cli(), ["invalid-input"])
    assert result.exit_code == 1
    assert "invalid time format" in result.output


def test_empty_selection():
    result = runner.invoke(cli(), ["   "])
    assert result.exit_code == 1
    assert "please select text to convert" in result.output
