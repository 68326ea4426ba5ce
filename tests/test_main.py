"""Tests for the command-line entry point."""

import json
from pathlib import Path

import pytest

from axe_fixer.main import fixed_path_for, run


class TestFixedPathFor:
    """Tests for fixed_path_for."""

    def test_default_suffix(self):
        assert fixed_path_for(Path("/pages/Dashboard.html")) == Path("/pages/Dashboard_fixed.html")

    def test_custom_suffix(self):
        assert fixed_path_for(Path("page.htm"), "-a11y") == Path("page-a11y.htm")

    def test_no_extension(self):
        assert fixed_path_for(Path("page")) == Path("page_fixed.html")


class TestRun:
    """Tests for run()."""

    @pytest.fixture
    def files(self, tmp_path, sample_html, sample_report_json):
        html_file = tmp_path / "Dashboard.html"
        html_file.write_text(sample_html)
        report_file = tmp_path / "report.json"
        report_file.write_text(sample_report_json)
        return html_file, report_file

    def test_writes_fixed_file(self, mock_env_vars, files, capsys):
        html_file, report_file = files

        assert run(str(html_file), str(report_file)) == 0

        fixed = html_file.with_name("Dashboard_fixed.html")
        assert fixed.exists()
        assert 'arialabel="submitBtn"' in fixed.read_text()

        out = capsys.readouterr().out
        assert "Elements not found in HTML:" in out
        assert '"missingBtn"' in out
        assert f"Fixed HTML saved to: {fixed}" in out

    def test_explicit_output(self, mock_env_vars, files, tmp_path):
        html_file, report_file = files
        output = tmp_path / "out" / "fixed.html"

        assert run(str(html_file), str(report_file), str(output)) == 0
        assert output.exists()

    def test_markdown_output(self, mock_env_vars, files, capsys):
        html_file, report_file = files

        assert run(str(html_file), str(report_file), report_format="markdown") == 0
        assert "# Accessibility Report" in capsys.readouterr().out

    def test_missing_file(self, mock_env_vars, files, tmp_path, capsys):
        _, report_file = files

        assert run(str(tmp_path / "nope.html"), str(report_file)) == 1
        assert "file not found" in capsys.readouterr().err

    def test_malformed_report(self, mock_env_vars, files, capsys):
        html_file, report_file = files
        report_file.write_text(json.dumps({"issues": []}))

        assert run(str(html_file), str(report_file)) == 1
        assert "allIssues" in capsys.readouterr().err
        assert not html_file.with_name("Dashboard_fixed.html").exists()
