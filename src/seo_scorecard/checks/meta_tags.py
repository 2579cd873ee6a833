"""Checks for title, meta description, canonical and robots tags."""

from ..models import CheckResult, Issue, IssueKind, PageFacts, Recommendation, Severity
from ..rubric import Rubric


def _check_length(
    name: str,
    label: str,
    value: str,
    bounds: tuple[int, int],
    points: int,
    partial: int,
    missing: tuple[IssueKind, str, Recommendation],
    out_of_range: tuple[IssueKind, Recommendation],
) -> CheckResult:
    """Presence plus length-window check shared by title and description."""
    low, high = bounds

    if not value.strip():
        kind, message, recommendation = missing
        return CheckResult(
            name=name,
            score=0,
            max_score=points,
            issues=(Issue(kind, message, Severity.CRITICAL),),
            recommendations=(recommendation,),
        )

    length = len(value)
    if low <= length <= high:
        return CheckResult(name=name, score=points, max_score=points)

    kind, recommendation = out_of_range
    return CheckResult(
        name=name,
        score=partial,
        max_score=points,
        issues=(Issue(
            kind,
            f"{label} length ({length} chars) should be between {low}-{high} characters",
            Severity.WARNING,
        ),),
        recommendations=(recommendation,),
    )


def check_title(facts: PageFacts, rubric: Rubric) -> CheckResult:
    """Title must exist and sit inside the configured length window."""
    low, high = rubric.title_length
    return _check_length(
        "Title",
        "Title",
        facts.seo.title,
        rubric.title_length,
        rubric.title_points,
        rubric.title_partial,
        missing=(
            IssueKind.MISSING_TITLE,
            "Page title is missing",
            Recommendation(
                priority=1,
                action=f"Add a unique, descriptive page title ({low}-{high} characters)",
                impact="Critical for search visibility",
            ),
        ),
        out_of_range=(
            IssueKind.TITLE_LENGTH,
            Recommendation(
                priority=2,
                action=f"Rewrite the page title to {low}-{high} characters",
                impact="Avoids truncated or underused titles in search results",
            ),
        ),
    )


def check_meta_description(facts: PageFacts, rubric: Rubric) -> CheckResult:
    """Meta description must exist and sit inside the configured length window."""
    low, high = rubric.description_length
    return _check_length(
        "Meta Description",
        "Meta description",
        facts.seo.meta_description,
        rubric.description_length,
        rubric.description_points,
        rubric.description_partial,
        missing=(
            IssueKind.MISSING_META_DESCRIPTION,
            "Meta description is missing",
            Recommendation(
                priority=1,
                action=f"Write a compelling meta description ({low}-{high} characters)",
                impact="Improves click-through rates from search results",
            ),
        ),
        out_of_range=(
            IssueKind.META_DESCRIPTION_LENGTH,
            Recommendation(
                priority=2,
                action=f"Adjust the meta description to {low}-{high} characters",
                impact="Keeps the full snippet visible in search results",
            ),
        ),
    )


def check_canonical(facts: PageFacts, rubric: Rubric) -> CheckResult:
    points = rubric.canonical_points
    if facts.seo.canonical_url.strip():
        return CheckResult(name="Canonical URL", score=points, max_score=points)

    return CheckResult(
        name="Canonical URL",
        score=0,
        max_score=points,
        issues=(Issue(IssueKind.MISSING_CANONICAL, "Missing canonical URL", Severity.SUGGESTION),),
        recommendations=(Recommendation(
            priority=3,
            action="Add a <link rel='canonical'> pointing at the preferred URL",
            impact="Prevents duplicate content from splitting ranking signals",
        ),),
    )


def check_robots(facts: PageFacts, rubric: Rubric) -> CheckResult:
    points = rubric.robots_points
    if facts.seo.robots.strip():
        return CheckResult(name="Robots Meta", score=points, max_score=points)

    return CheckResult(
        name="Robots Meta",
        score=0,
        max_score=points,
        issues=(Issue(IssueKind.MISSING_ROBOTS, "Missing robots meta tag", Severity.SUGGESTION),),
        recommendations=(Recommendation(
            priority=3,
            action="Add a robots meta tag stating the indexing policy (e.g. 'index, follow')",
            impact="Makes crawler behaviour explicit",
        ),),
    )
