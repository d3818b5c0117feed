"""Tests for the ui19-export CLI commands."""

import pytest
from click.testing import CliRunner

from ui19export.cli.__main__ import cli

BOM = b"\xef\xbb\xbf"


@pytest.fixture
def runner():
    return CliRunner()


def test_systems_lists_all(runner):
    result = runner.invoke(cli, ["systems"])

    assert result.exit_code == 0
    for system in ("sage", "psiber", "sars", "xero", "kerridge", "automate", "quickbooks"):
        assert system in result.output
    assert "fixed width (74 chars)" in result.output
    assert "H/D/T envelope" in result.output


def test_export_writes_file(runner, isolated_config, report_file, tmp_path):
    out_dir = tmp_path / "out"

    result = runner.invoke(cli, ["export", str(report_file), "--system", "sars", "-o", str(out_dir)])

    assert result.exit_code == 0, result.output
    files = list(out_dir.glob("SARS_Acme_Holdings_January_2026_*.csv"))
    assert len(files) == 1
    content = files[0].read_bytes()
    assert content.startswith(BOM + b"H|U123456789|2026|01\n")
    assert content.endswith(b"\nT|1")
    assert "Saved to:" in result.output


def test_export_to_stdout(runner, isolated_config, report_file):
    result = runner.invoke(cli, ["export", str(report_file), "-s", "quickbooks", "--stdout"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith("Employee ID,Last Name")
    assert lines[1] == "EMP001,Naidoo,P,8001015009087,01/15/2026,,18500.00,160,Yes"


def test_export_uses_default_system(runner, isolated_config, report_file):
    assert runner.invoke(cli, ["settings", "set", "default_system", "kerridge"]).exit_code == 0

    result = runner.invoke(cli, ["export", str(report_file), "--stdout"])

    assert result.exit_code == 0, result.output
    assert len(result.output.rstrip("\n")) == 74


def test_export_without_system_fails(runner, isolated_config, report_file):
    result = runner.invoke(cli, ["export", str(report_file)])

    assert result.exit_code == 1
    assert "No target system" in result.output


def test_export_rejects_unknown_system(runner, isolated_config, report_file):
    result = runner.invoke(cli, ["export", str(report_file), "-s", "pastel"])

    assert result.exit_code == 2
    assert "pastel" in result.output


def test_export_invalid_report(runner, isolated_config, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"reportId": "x"}')

    result = runner.invoke(cli, ["export", str(bad), "-s", "sage"])

    assert result.exit_code == 1
    assert "Invalid report" in result.output


def test_declaration_command(runner, isolated_config, report_file, tmp_path):
    result = runner.invoke(cli, ["declaration", str(report_file), "-o", str(tmp_path / "decl")])

    assert result.exit_code == 0, result.output
    files = list((tmp_path / "decl").glob("UI19_*.csv"))
    assert len(files) == 1


def test_preview(runner, isolated_config, report_file):
    result = runner.invoke(cli, ["preview", str(report_file)])

    assert result.exit_code == 0, result.output
    assert "January 2026" in result.output
    assert "Contributors: 1   Non-contributors: 0" in result.output


def test_settings_show_and_unset(runner, isolated_config):
    runner.invoke(cli, ["settings", "set", "default_system", "xero"])

    shown = runner.invoke(cli, ["settings", "show"])
    assert "default_system: xero" in shown.output

    cleared = runner.invoke(cli, ["settings", "unset", "default_system"])
    assert "Cleared default_system" in cleared.output
