"""Scoring engine: PageFacts in, ScoreReport out."""

import logging
from typing import Any

from .checks import RUBRIC_CHECKS
from .models import (
    CheckResult,
    Issue,
    IssueKind,
    PageFacts,
    QuickReport,
    ScoreReport,
    Severity,
)
from .normalizer import normalize
from .rubric import DEFAULT_RUBRIC, Rubric, grade_for

logger = logging.getLogger(__name__)


def run_checks(facts: PageFacts, rubric: Rubric = DEFAULT_RUBRIC) -> list[CheckResult]:
    """Run every check the rubric gives weight to, in rubric order."""
    return [
        check(facts, rubric)
        for weight, check in RUBRIC_CHECKS
        if getattr(rubric, weight) > 0
    ]


def score(facts: PageFacts, rubric: Rubric = DEFAULT_RUBRIC) -> ScoreReport:
    """Score a page.

    Args:
        facts: Normalized page facts
        rubric: Weights and thresholds to score with

    Returns:
        ScoreReport with clamped score, grade, issues and recommendations
        sorted by priority (rubric order within a priority).
    """
    checks = run_checks(facts, rubric)

    total = sum(c.score for c in checks)
    overall = max(0, min(100, total))

    issues = tuple(issue for c in checks for issue in c.issues)
    # sorted() is stable, so equal priorities keep rubric order
    recommendations = tuple(sorted(
        (rec for c in checks for rec in c.recommendations),
        key=lambda r: r.priority,
    ))

    logger.debug("Scored %s: %d/100 (%d issues)", facts.url, overall, len(issues))

    return ScoreReport(
        url=facts.url,
        overall_score=overall,
        grade=grade_for(overall),
        issues=issues,
        recommendations=recommendations,
        h1_count=len(facts.headings.h1),
        h2_count=len(facts.headings.h2),
        image_count=len(facts.images),
        link_count=facts.links.total,
        word_count=facts.content.word_count,
        checks=tuple(checks),
    )


def analyze_page(url: str, raw_extraction: Any, rubric: Rubric = DEFAULT_RUBRIC) -> ScoreReport:
    """Normalize a raw extraction result and score it."""
    return score(normalize(raw_extraction, url=url), rubric)


def quick_check(facts: PageFacts) -> QuickReport:
    """Presence-only score: title, description, single H1 and content length."""
    h1_count = len(facts.headings.h1)

    quick_score = 0
    if facts.seo.title.strip():
        quick_score += 25
    if facts.seo.meta_description.strip():
        quick_score += 25
    if h1_count == 1:
        quick_score += 25
    if facts.content.word_count >= DEFAULT_RUBRIC.min_word_count:
        quick_score += 25

    return QuickReport(
        url=facts.url,
        title=facts.seo.title,
        meta_description=facts.seo.meta_description,
        h1_count=h1_count,
        image_count=len(facts.images),
        word_count=facts.content.word_count,
        quick_score=quick_score,
        grade=grade_for(quick_score),
    )


def failed_report(url: str, error: str) -> ScoreReport:
    """Placeholder report for a page whose extraction failed."""
    return ScoreReport(
        url=url,
        overall_score=0,
        grade=grade_for(0),
        issues=(Issue(
            IssueKind.EXTRACTION_FAILED,
            f"Unable to analyze this page: {error}",
            Severity.CRITICAL,
        ),),
        error=error,
    )
