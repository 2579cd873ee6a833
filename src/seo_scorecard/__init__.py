"""seo-scorecard - heuristic SEO scoring for extracted page data."""

__version__ = "1.0.0"

from .engine import analyze_page, failed_report, quick_check, score
from .normalizer import normalize
from .rubric import DEFAULT_RUBRIC, EXTENDED_RUBRIC, Rubric, grade_for

__all__ = [
    "__version__",
    "analyze_page",
    "failed_report",
    "quick_check",
    "score",
    "normalize",
    "Rubric",
    "DEFAULT_RUBRIC",
    "EXTENDED_RUBRIC",
    "grade_for",
]
