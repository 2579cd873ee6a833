"""Checks for headings, content length and images."""

from ..models import CheckResult, Issue, IssueKind, PageFacts, Recommendation, Severity
from ..rubric import Rubric


def check_h1(facts: PageFacts, rubric: Rubric) -> CheckResult:
    """Exactly one H1 earns full credit, several earn partial credit."""
    points = rubric.h1_points
    h1_count = len(facts.headings.h1)

    if h1_count == 1:
        return CheckResult(name="H1 Heading", score=points, max_score=points)

    if h1_count == 0:
        return CheckResult(
            name="H1 Heading",
            score=0,
            max_score=points,
            issues=(Issue(IssueKind.MISSING_H1, "No H1 tag found on the page", Severity.CRITICAL),),
            recommendations=(Recommendation(
                priority=1,
                action="Add a single H1 tag with your primary keyword",
                impact="Essential for content hierarchy and SEO",
            ),),
        )

    return CheckResult(
        name="H1 Heading",
        score=rubric.h1_partial,
        max_score=points,
        issues=(Issue(
            IssueKind.MULTIPLE_H1,
            f"Multiple H1 tags found ({h1_count}). Should have exactly one.",
            Severity.WARNING,
        ),),
        recommendations=(Recommendation(
            priority=2,
            action="Keep one H1 and demote the others to H2",
            impact="Gives the page a single clear topic",
        ),),
    )


def check_word_count(facts: PageFacts, rubric: Rubric) -> CheckResult:
    points = rubric.word_count_points
    word_count = facts.content.word_count

    if word_count >= rubric.min_word_count:
        return CheckResult(name="Content Length", score=points, max_score=points)

    return CheckResult(
        name="Content Length",
        score=0,
        max_score=points,
        issues=(Issue(
            IssueKind.THIN_CONTENT,
            f"Content is thin ({word_count} words). Aim for at least {rubric.min_word_count} words.",
            Severity.SUGGESTION,
        ),),
        recommendations=(Recommendation(
            priority=2,
            action=f"Expand content to at least {rubric.min_word_count}-500 words",
            impact="Provides more context for search engines",
        ),),
    )


def check_images(facts: PageFacts, rubric: Rubric) -> CheckResult:
    """Images should exist and all carry non-blank alt text."""
    points = rubric.image_alt_points

    if not facts.images:
        return CheckResult(
            name="Image Alt Text",
            score=0,
            max_score=points,
            issues=(Issue(
                IssueKind.NO_IMAGES,
                "No images found. Consider adding relevant images.",
                Severity.SUGGESTION,
            ),),
            recommendations=(Recommendation(
                priority=3,
                action="Add relevant images with descriptive alt text",
                impact="Makes the page eligible for image search traffic",
            ),),
        )

    missing_alt = sum(1 for img in facts.images if not img.has_alt)
    if missing_alt == 0:
        return CheckResult(name="Image Alt Text", score=points, max_score=points)

    return CheckResult(
        name="Image Alt Text",
        score=rubric.image_alt_partial,
        max_score=points,
        issues=(Issue(
            IssueKind.MISSING_ALT_TEXT,
            f"{missing_alt} image{'s' if missing_alt != 1 else ''} missing alt text",
            Severity.WARNING,
        ),),
        recommendations=(Recommendation(
            priority=2,
            action="Add descriptive alt text to all images",
            impact="Improves accessibility and image search visibility",
        ),),
    )


def check_heading_hierarchy(facts: PageFacts, rubric: Rubric) -> CheckResult:
    """One H1, and no H3 unless some H2 introduces it."""
    points = rubric.heading_hierarchy_points
    headings = facts.headings
    valid = len(headings.h1) == 1 and (not headings.h3 or bool(headings.h2))

    if valid:
        return CheckResult(name="Heading Hierarchy", score=points, max_score=points)

    return CheckResult(
        name="Heading Hierarchy",
        score=rubric.heading_hierarchy_partial,
        max_score=points,
        issues=(Issue(
            IssueKind.HEADING_HIERARCHY,
            "Heading levels skip or lack a single H1 (H1 > H2 > H3...)",
            Severity.SUGGESTION,
        ),),
        recommendations=(Recommendation(
            priority=3,
            action="Improve heading hierarchy (H1 > H2 > H3...)",
            impact="Helps crawlers understand how sections relate",
        ),),
    )
