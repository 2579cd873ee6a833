"""
Tests for report serialization and persistence
"""
import json

from seo_scorecard.batch import BatchResult
from seo_scorecard.engine import failed_report, quick_check, score
from seo_scorecard.reports import (
    batch_to_dict,
    quick_report_to_dict,
    report_filename,
    report_to_dict,
    save_report,
)

STAMP = "2026-01-01T00:00:00+00:00"


class TestReportToDict:

    def test_plain_json(self, sample_facts):
        data = report_to_dict(score(sample_facts), analyzed_at=STAMP)

        assert json.loads(json.dumps(data)) == data
        assert data["overall_score"] == 85
        assert data["grade"] == "A"
        assert data["issues"][0] == {
            "kind": "meta_description_length",
            "message": data["issues"][0]["message"],
            "severity": "warning",
        }
        assert data["recommendations"][0]["priority"] == 2
        assert data["checks"][0] == {"name": "Title", "score": 15, "max_score": 15}
        assert data["error"] is None
        assert data["analyzed_at"] == STAMP

    def test_same_report_same_payload(self, sample_facts):
        first = report_to_dict(score(sample_facts), analyzed_at=STAMP)
        second = report_to_dict(score(sample_facts), analyzed_at=STAMP)
        assert json.dumps(first) == json.dumps(second)

    def test_timestamp_defaults_to_now(self, empty_facts):
        assert report_to_dict(score(empty_facts))["analyzed_at"]

    def test_failed_report(self):
        data = report_to_dict(failed_report("https://down.example", "HTTP 500"), analyzed_at=STAMP)
        assert data["error"] == "HTTP 500"
        assert data["issues"][0]["kind"] == "extraction_failed"

    def test_quick_report(self, sample_facts):
        data = quick_report_to_dict(quick_check(sample_facts), analyzed_at=STAMP)
        assert data["quick_score"] == 100
        assert data["title"] == "Sample Page Title for example.com"


class TestBatchToDict:

    def test_batch(self, sample_facts):
        result = BatchResult(reports=[score(sample_facts), failed_report("https://x.example", "HTTP 404")])
        data = batch_to_dict(result, analyzed_at=STAMP)

        assert data["summary"]["successful"] == 1
        assert len(data["pages"]) == 2
        assert data["pages"][1]["error"] == "HTTP 404"
        json.dumps(data)


class TestSaveReport:

    def test_filename(self):
        assert report_filename("https://example.com/a", day="2026-01-01") == \
            "seo-report-https---example-com-a-2026-01-01.json"

    def test_writes_json(self, tmp_path, sample_facts):
        payload = report_to_dict(score(sample_facts), analyzed_at=STAMP)
        path = save_report(payload, "https://example.com", tmp_path / "reports")

        assert path.parent == tmp_path / "reports"
        assert path.name.startswith("seo-report-https---example-com-")
        assert json.loads(path.read_text()) == payload


class TestAnnotations:

    def test_batch_to_dict_typed(self):
        assert batch_to_dict.__annotations__["result"] == "BatchResult"
