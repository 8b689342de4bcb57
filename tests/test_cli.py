"""Tests for the command line entry point."""

import json

from click.testing import CliRunner

from main import main

runner = CliRunner()


class TestGenerate:
    def test_generates_body_and_cover(self, manuscript_file, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, [str(manuscript_file), "--out-dir", str(out)])
        assert result.exit_code == 0, result.output
        assert (out / "mon_livre__2024_corps.pdf").exists()
        assert (out / "mon_livre__2024_couverture.pdf").exists()
        assert "Generated body" in result.output
        assert "Generated cover" in result.output

    def test_cover_only(self, manuscript_file, tmp_path):
        result = runner.invoke(main, [str(manuscript_file), "--out-dir", str(tmp_path), "--no-body", "--font", "courier"])
        assert result.exit_code == 0, result.output
        assert not (tmp_path / "mon_livre__2024_corps.pdf").exists()
        assert (tmp_path / "mon_livre__2024_couverture.pdf").exists()

    def test_invalid_manuscript(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"title": "No chapters"}), encoding="utf-8")
        result = runner.invoke(main, [str(bad), "--out-dir", str(tmp_path)])
        assert result.exit_code == 1
        assert "Required fields" in result.output

    def test_unknown_font_rejected(self, manuscript_file):
        result = runner.invoke(main, [str(manuscript_file), "--font", "comic"])
        assert result.exit_code == 2

    def test_manuscript_required(self):
        result = runner.invoke(main, [])
        assert result.exit_code == 2


class TestValidate:
    def test_validate_generated_cover(self, manuscript_file, tmp_path):
        runner.invoke(main, [str(manuscript_file), "--out-dir", str(tmp_path), "--no-body"])
        cover = tmp_path / "mon_livre__2024_couverture.pdf"
        result = runner.invoke(main, ["--validate-path", str(cover), "--validate-pages", "2"])
        assert result.exit_code == 0, result.output
        assert "No issues found" in result.output

    def test_validate_reports_errors(self, manuscript_file, tmp_path):
        runner.invoke(main, [str(manuscript_file), "--out-dir", str(tmp_path), "--no-body"])
        cover = tmp_path / "mon_livre__2024_couverture.pdf"
        result = runner.invoke(main, ["--validate-path", str(cover), "--validate-pages", "5"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
