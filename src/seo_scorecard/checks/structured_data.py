"""Check for structured data (JSON-LD, microdata) on the page."""

from ..models import CheckResult, Issue, IssueKind, PageFacts, Recommendation, Severity
from ..rubric import Rubric


def check_structured_data(facts: PageFacts, rubric: Rubric) -> CheckResult:
    points = rubric.structured_data_points
    if facts.technical.structured_data:
        return CheckResult(name="Structured Data", score=points, max_score=points)

    return CheckResult(
        name="Structured Data",
        score=0,
        max_score=points,
        issues=(Issue(IssueKind.NO_STRUCTURED_DATA, "No structured data found", Severity.SUGGESTION),),
        recommendations=(Recommendation(
            priority=3,
            action="Implement structured data (Schema.org)",
            impact="Enables rich snippets in search results",
        ),),
    )
