"""Check internal and external linking."""

from ..models import CheckResult, Issue, IssueKind, PageFacts, Recommendation, Severity
from ..rubric import Rubric


def check_links(facts: PageFacts, rubric: Rubric) -> CheckResult:
    """Both link directions earn full credit, one direction earns partial credit."""
    points = rubric.linking_points
    internal = len(facts.links.internal)
    external = len(facts.links.external)

    if internal and external:
        return CheckResult(name="Linking", score=points, max_score=points)

    # A page with no links at all gets nothing
    score = rubric.linking_partial if (internal or external) else 0
    return CheckResult(
        name="Linking",
        score=score,
        max_score=points,
        issues=(Issue(
            IssueKind.WEAK_LINKING,
            f"Improve internal and external linking ({internal} internal, {external} external)",
            Severity.SUGGESTION,
        ),),
        recommendations=(Recommendation(
            priority=3,
            action="Improve internal and external linking",
            impact="Spreads link equity and gives crawlers context",
        ),),
    )
