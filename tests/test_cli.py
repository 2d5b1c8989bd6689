from __future__ import annotations

import pytest
from typer.testing import CliRunner

from ryandata_postcode_utils import cli

runner = CliRunner()


def test_validate_ok() -> None:
    result = runner.invoke(cli.app, ["validate", "US", "12345"])

    assert result.exit_code == cli.EXIT_OK
    assert "OK" in result.stdout


def test_validate_mismatch() -> None:
    result = runner.invoke(cli.app, ["validate", "US", "1234"])

    assert result.exit_code == cli.EXIT_FAILED
    assert "format_mismatch" in result.stdout


def test_unknown_country_exit_code() -> None:
    result = runner.invoke(cli.app, ["validate", "ZZ", "12345"])

    assert result.exit_code == cli.EXIT_UNKNOWN_COUNTRY
    assert "rule_not_found" in result.stdout


def test_rule() -> None:
    result = runner.invoke(cli.app, ["rule", "gb"])

    assert result.exit_code == 0
    assert "United Kingdom" in result.stdout
    assert "gb_inward_split" in result.stdout


def test_rule_for_country_without_postcodes() -> None:
    result = runner.invoke(cli.app, ["rule", "BZ"])

    assert result.exit_code == cli.EXIT_FAILED
    assert "No postal code" in result.stdout


def test_rule_unknown_country() -> None:
    assert runner.invoke(cli.app, ["rule", "ZZ"]).exit_code == cli.EXIT_UNKNOWN_COUNTRY


def test_in_range() -> None:
    inside = runner.invoke(cli.app, ["in-range", "GB", "S109EE", "S129EE", "S119EE"])
    below = runner.invoke(cli.app, ["in-range", "US", "50000", "99999", "12345"])

    assert inside.exit_code == 0
    assert below.exit_code == cli.EXIT_FAILED
    assert "below_range" in below.stdout


def test_in_range_without_format_fix() -> None:
    result = runner.invoke(
        cli.app, ["in-range", "GB", "S10 9EE", "S12 9EE", "S119EE", "--no-format-fix"]
    )

    assert result.exit_code == cli.EXIT_FAILED


@pytest.mark.parametrize(
    ("args", "exit_code"),
    [
        (["00000-09999", "10000-19999"], 0),
        (["00000-09999", "05000-15000"], 1),
        (["00000:09999", "10000:19999", "--separator", ":"], 0),
        (["00000"], 1),
    ],
)
def test_overlap(args: list[str], exit_code: int) -> None:
    result = runner.invoke(cli.app, ["overlap", "US", *args])

    assert result.exit_code == exit_code


def test_overlap_reports_pair() -> None:
    result = runner.invoke(cli.app, ["overlap", "US", "00000-09999", "05000-15000"])

    assert "00000-09999" in result.stdout
    assert "05000-15000" in result.stdout


def test_province() -> None:
    found = runner.invoke(cli.app, ["province", "US", "new york"])
    missing = runner.invoke(cli.app, ["province", "US", "Atlantis"])

    assert found.exit_code == 0
    assert "NY: New York" in found.stdout
    assert missing.exit_code == cli.EXIT_FAILED
    assert "province_not_found" in missing.stdout


def test_verbose_flag() -> None:
    result = runner.invoke(cli.app, ["--verbose", "validate", "US", "12345"])

    assert result.exit_code == 0
