"""Checks for Open Graph and Twitter Card tags."""

from ..models import CheckResult, Issue, IssueKind, PageFacts, Recommendation, Severity
from ..rubric import Rubric


def check_open_graph(facts: PageFacts, rubric: Rubric) -> CheckResult:
    points = rubric.open_graph_points
    if facts.social.open_graph.title.strip():
        return CheckResult(name="Open Graph", score=points, max_score=points)

    return CheckResult(
        name="Open Graph",
        score=0,
        max_score=points,
        issues=(Issue(IssueKind.MISSING_OPEN_GRAPH, "Missing Open Graph tags", Severity.SUGGESTION),),
        recommendations=(Recommendation(
            priority=3,
            action="Add Open Graph tags (og:title, og:description, og:image)",
            impact="Controls how the page looks when shared on social platforms",
        ),),
    )


def check_twitter_card(facts: PageFacts, rubric: Rubric) -> CheckResult:
    points = rubric.twitter_card_points
    if facts.social.twitter.card.strip():
        return CheckResult(name="Twitter Card", score=points, max_score=points)

    return CheckResult(
        name="Twitter Card",
        score=0,
        max_score=points,
        issues=(Issue(IssueKind.MISSING_TWITTER_CARD, "Missing Twitter Card tags", Severity.SUGGESTION),),
        recommendations=(Recommendation(
            priority=3,
            action="Add a twitter:card meta tag (e.g. summary_large_image)",
            impact="Enables rich previews on X/Twitter",
        ),),
    )
