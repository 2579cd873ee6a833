"""JSON serialization and persistence of reports."""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from .models import CheckResult, Issue, QuickReport, Recommendation, ScoreReport

if TYPE_CHECKING:
    from .batch import BatchResult

logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def issue_to_dict(issue: Issue) -> dict[str, Any]:
    return {
        "kind": issue.kind.value,
        "message": issue.message,
        "severity": issue.severity.value,
    }


def recommendation_to_dict(rec: Recommendation) -> dict[str, Any]:
    return {"priority": rec.priority, "action": rec.action, "impact": rec.impact}


def check_to_dict(check: CheckResult) -> dict[str, Any]:
    return {"name": check.name, "score": check.score, "max_score": check.max_score}


def report_to_dict(report: ScoreReport, analyzed_at: Optional[str] = None) -> dict[str, Any]:
    """Plain-data view of a report, ready for ``json.dumps``."""
    return {
        "url": report.url,
        "overall_score": report.overall_score,
        "grade": report.grade,
        "h1_count": report.h1_count,
        "h2_count": report.h2_count,
        "image_count": report.image_count,
        "link_count": report.link_count,
        "word_count": report.word_count,
        "issues": [issue_to_dict(i) for i in report.issues],
        "recommendations": [recommendation_to_dict(r) for r in report.recommendations],
        "checks": [check_to_dict(c) for c in report.checks],
        "error": report.error,
        "analyzed_at": analyzed_at or _now(),
    }


def quick_report_to_dict(report: QuickReport, analyzed_at: Optional[str] = None) -> dict[str, Any]:
    return {
        "url": report.url,
        "title": report.title,
        "meta_description": report.meta_description,
        "h1_count": report.h1_count,
        "image_count": report.image_count,
        "word_count": report.word_count,
        "quick_score": report.quick_score,
        "grade": report.grade,
        "analyzed_at": analyzed_at or _now(),
    }


def batch_to_dict(result: "BatchResult", analyzed_at: Optional[str] = None) -> dict[str, Any]:
    """Comparative batch report: summary plus every page report."""
    analyzed_at = analyzed_at or _now()
    return {
        "summary": result.summary(),
        "pages": [report_to_dict(r, analyzed_at) for r in result.reports],
        "analyzed_at": analyzed_at,
    }


def report_filename(identifier: str, day: Optional[str] = None) -> str:
    slug = re.sub(r"[^a-z0-9]", "-", identifier, flags=re.IGNORECASE)
    day = day or datetime.now(timezone.utc).strftime("%Y-%m-%d")
    return f"seo-report-{slug}-{day}.json"


def save_report(payload: dict[str, Any], identifier: str, directory: str | Path) -> Path:
    """Write ``payload`` as JSON under ``directory`` and return the path."""
    output_dir = Path(directory)
    output_dir.mkdir(parents=True, exist_ok=True)

    path = output_dir / report_filename(identifier)
    path.write_text(json.dumps(payload, indent=2))
    logger.info("Report saved: %s", path)
    return path
