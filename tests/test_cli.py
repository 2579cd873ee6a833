"""
Tests for the command-line interface
"""
import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from seo_scorecard import __version__
from seo_scorecard.cli import cli
from seo_scorecard.extraction import ExtractionError


@pytest.fixture
def runner(monkeypatch, tmp_path):
    monkeypatch.setenv("FIRECRAWL_API_KEY", "fc-test")
    monkeypatch.setenv("SEO_SCORECARD_REPORT_DIR", str(tmp_path / "reports"))
    return CliRunner()


class TestScoreCommand:
    """Scoring saved extraction files"""

    def test_json_output(self, runner, tmp_path, ideal_extraction):
        path = tmp_path / "page.json"
        path.write_text(json.dumps(ideal_extraction))

        result = runner.invoke(cli, ["score", str(path), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["overall_score"] == 100
        assert data["url"] == "https://oakline.example/tables"

    def test_stdin_with_url(self, runner):
        result = runner.invoke(cli, ["score", "-", "--url", "https://x.example", "--json"], input="{}")

        data = json.loads(result.output)
        assert data["url"] == "https://x.example"
        assert data["grade"] == "F"

    def test_rich_output(self, runner, tmp_path, sample_extraction):
        path = tmp_path / "page.json"
        path.write_text(json.dumps(sample_extraction))

        result = runner.invoke(cli, ["score", str(path), "--url", "https://example.com"])

        assert result.exit_code == 0, result.output
        assert "85/100" in result.output
        assert "missing alt text" in result.output

    def test_invalid_json(self, runner, tmp_path):
        path = tmp_path / "page.json"
        path.write_text("{not json")
        result = runner.invoke(cli, ["score", str(path)])
        assert result.exit_code == 2


class TestScanCommand:
    """Extract and score a URL"""

    @patch("seo_scorecard.cli.FirecrawlExtractor.extract")
    def test_scan_json(self, mock_extract, runner, sample_extraction):
        mock_extract.return_value = sample_extraction

        result = runner.invoke(cli, ["scan", "example.com", "--json"])

        assert result.exit_code == 0, result.output
        mock_extract.assert_called_once_with("https://example.com")
        data = json.loads(result.output)
        assert data["url"] == "https://example.com"
        assert data["overall_score"] == 85

    @patch("seo_scorecard.cli.FirecrawlExtractor.extract")
    def test_scan_extended_rubric(self, mock_extract, runner, sample_extraction):
        mock_extract.return_value = sample_extraction
        result = runner.invoke(cli, ["scan", "example.com", "--json", "--rubric", "extended"])
        names = [c["name"] for c in json.loads(result.output)["checks"]]
        assert "Heading Hierarchy" in names

    @patch("seo_scorecard.cli.FirecrawlExtractor.extract")
    def test_scan_failure_placeholder(self, mock_extract, runner):
        mock_extract.side_effect = ExtractionError("https://down.example", "HTTP 503")

        result = runner.invoke(cli, ["scan", "down.example", "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["overall_score"] == 0
        assert data["error"] == "HTTP 503"

    @patch("seo_scorecard.cli.FirecrawlExtractor.extract")
    def test_scan_save(self, mock_extract, runner, tmp_path, sample_extraction):
        mock_extract.return_value = sample_extraction

        result = runner.invoke(cli, ["scan", "example.com", "--save"])

        assert result.exit_code == 0, result.output
        saved = list((tmp_path / "reports").glob("seo-report-*.json"))
        assert len(saved) == 1


class TestQuickCommand:

    @patch("seo_scorecard.cli.FirecrawlExtractor.extract")
    def test_quick_json(self, mock_extract, runner, sample_extraction):
        mock_extract.return_value = sample_extraction
        result = runner.invoke(cli, ["quick", "example.com", "--json"])
        assert json.loads(result.output)["quick_score"] == 100

    @patch("seo_scorecard.cli.FirecrawlExtractor.extract")
    def test_quick_failure(self, mock_extract, runner):
        mock_extract.side_effect = ExtractionError("https://down.example", "Timeout after 30.0s")
        result = runner.invoke(cli, ["quick", "down.example"])
        assert result.exit_code == 1
        assert "Timeout" in result.output


class TestBatchCommand:

    @patch("seo_scorecard.cli.FirecrawlExtractor.extract")
    def test_batch_json(self, mock_extract, runner, tmp_path, sample_extraction):
        def extract(url):
            if "down" in url:
                raise ExtractionError(url, "HTTP 500")
            return sample_extraction
        mock_extract.side_effect = extract

        urls = tmp_path / "urls.txt"
        urls.write_text("example.com\n# skip\ndown.example\n")

        result = runner.invoke(cli, ["batch", str(urls), "--delay", "0", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["summary"]["total_analyzed"] == 2
        assert data["summary"]["failed"] == 1
        assert data["pages"][1]["error"] == "HTTP 500"

    def test_batch_empty_file(self, runner, tmp_path):
        urls = tmp_path / "urls.txt"
        urls.write_text("\n# nothing\n")
        result = runner.invoke(cli, ["batch", str(urls)])
        assert result.exit_code == 2


class TestGroup:

    def test_help(self, runner):
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "scan" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert __version__ in result.output
