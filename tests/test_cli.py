"""Tests for the command line entry points."""

from typer.testing import CliRunner

from run import app

runner = CliRunner()


def test_show(data_dir):
    result = runner.invoke(app, ["show", "--data-dir", str(data_dir), "--today", "19,10,2026", "--no-color"])
    assert result.exit_code == 0
    assert "next birthday: Today!: Grandma" in result.output
    assert "next saint day: none found" in result.output
    assert "next special: 03/11/2026 (in 15 days): Dentist" in result.output


def test_show_rejects_bad_today(data_dir):
    result = runner.invoke(app, ["show", "--data-dir", str(data_dir), "--today", "19,10"])
    assert result.exit_code == 1
    assert "missing 'year' slot" in result.output


def test_show_stops_on_invalid_record(data_dir):
    (data_dir / "zz.rce").write_text("birthday=a;1,1\n", encoding="utf-8")
    result = runner.invoke(app, ["show", "--data-dir", str(data_dir), "--today", "19,10,2026"])
    assert result.exit_code == 1
    assert "no event kind matched" in result.output


def test_show_skip_invalid(data_dir):
    (data_dir / "zz.rce").write_text("birthday=a;1,1\n", encoding="utf-8")
    result = runner.invoke(
        app, ["show", "--data-dir", str(data_dir), "--today", "19,10,2026", "--skip-invalid", "--no-color"]
    )
    assert result.exit_code == 0
    assert "next holiday: 31/10/2026 (in 12 days): Halloween" in result.output


def test_show_missing_data_dir(tmp_path):
    result = runner.invoke(app, ["show", "--data-dir", str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert "could not read data folder" in result.output


def test_verify_data(data_dir):
    result = runner.invoke(app, ["verify-data", "--data-dir", str(data_dir)])
    assert result.exit_code == 0
    assert "Found 6 records in 1 files." in result.output
    assert "Found 2 birthday events." in result.output


def test_verify_data_invalid(data_dir):
    (data_dir / "zz.rce").write_text("special=Oops;1,1\n", encoding="utf-8")
    result = runner.invoke(app, ["verify-data", "--data-dir", str(data_dir)])
    assert result.exit_code == 1
    assert "zz.rce:1: missing 'year' slot" in result.output


def test_show_malformed_settings(data_dir, tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("colors: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["show", "--config", str(config), "--data-dir", str(data_dir)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_verify_data_malformed_settings(data_dir, tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("colors: [unclosed\n", encoding="utf-8")
    result = runner.invoke(app, ["verify-data", "--config", str(config), "--data-dir", str(data_dir)])
    assert result.exit_code == 1
    assert "Records invalid" in result.output
