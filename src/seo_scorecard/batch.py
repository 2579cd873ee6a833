"""Score many pages, tolerating per-page extraction failures."""

import logging
import threading
import time
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Optional

from .engine import analyze_page, failed_report
from .extraction import Extractor, ExtractionError, normalize_url
from .models import IssueKind, ScoreReport, Severity
from .rubric import DEFAULT_RUBRIC, Rubric

logger = logging.getLogger(__name__)


class Throttle(ABC):
    """Spacing policy for calls to the extraction service."""

    @abstractmethod
    def wait(self) -> None:
        """Block until the next call may start."""


class NoThrottle(Throttle):
    def wait(self) -> None:
        return None


class FixedDelay(Throttle):
    """Keep at least ``seconds`` between the starts of consecutive calls."""

    def __init__(self, seconds: float, sleep: Callable[[float], None] = time.sleep,
                 clock: Callable[[], float] = time.monotonic):
        self.seconds = seconds
        self._sleep = sleep
        self._clock = clock
        self._last: Optional[float] = None

    def wait(self) -> None:
        now = self._clock()
        if self._last is not None:
            remaining = self.seconds - (now - self._last)
            if remaining > 0:
                self._sleep(remaining)
                now = self._clock()
        self._last = now


def read_url_list(text: str) -> list[str]:
    """Parse one URL per line, skipping blanks and ``#`` comments."""
    urls = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    return urls


# Issue kinds that count as a page's strengths when absent
_STRENGTHS = (
    ("Complete metadata", {IssueKind.MISSING_TITLE, IssueKind.MISSING_META_DESCRIPTION}),
    ("Proper H1 usage", {IssueKind.MISSING_H1, IssueKind.MULTIPLE_H1}),
    ("Structured data implementation", {IssueKind.NO_STRUCTURED_DATA}),
)


def page_strengths(report: ScoreReport) -> list[str]:
    kinds = {issue.kind for issue in report.issues}
    return [label for label, blockers in _STRENGTHS if not kinds & blockers]


@dataclass
class BatchResult:
    """Reports for every URL of a batch, in input order."""
    reports: list[ScoreReport] = field(default_factory=list)

    @property
    def successful(self) -> list[ScoreReport]:
        return [r for r in self.reports if not r.failed]

    @property
    def failed(self) -> list[ScoreReport]:
        return [r for r in self.reports if r.failed]

    @property
    def average_score(self) -> float:
        ok = self.successful
        if not ok:
            return 0.0
        return sum(r.overall_score for r in ok) / len(ok)

    def common_issues(self, limit: int = 5) -> list[dict[str, Any]]:
        """Most frequent critical/warning issue kinds across successful pages."""
        ok = self.successful
        counts: Counter = Counter()
        for report in ok:
            # Count each kind once per page
            counts.update({
                issue.kind for issue in report.issues
                if issue.severity in (Severity.CRITICAL, Severity.WARNING)
            })
        return [
            {
                "type": kind.value,
                "count": count,
                "percentage": round(count / len(ok) * 100, 1),
            }
            for kind, count in counts.most_common(limit)
        ]

    def best_performer(self) -> Optional[dict[str, Any]]:
        ok = self.successful
        if not ok:
            return None
        best = max(ok, key=lambda r: r.overall_score)
        return {
            "url": best.url,
            "score": best.overall_score,
            "strengths": page_strengths(best),
        }

    def summary(self) -> dict[str, Any]:
        return {
            "total_analyzed": len(self.reports),
            "successful": len(self.successful),
            "failed": len(self.failed),
            "average_score": round(self.average_score, 1),
            "common_issues": self.common_issues(),
            "best_performer": self.best_performer(),
        }


class BatchAnalyzer:
    """Extracts and scores a list of URLs.

    Extraction calls go through ``throttle`` one at a time; scoring needs no
    coordination. A page whose extraction fails gets a placeholder report and
    the batch carries on.
    """

    def __init__(
        self,
        extractor: Extractor,
        rubric: Rubric = DEFAULT_RUBRIC,
        throttle: Optional[Throttle] = None,
        max_workers: int = 1,
    ):
        self.extractor = extractor
        self.rubric = rubric
        self.throttle = throttle or NoThrottle()
        self.max_workers = max(1, max_workers)
        self._lock = threading.Lock()

    def analyze(self, url: str) -> ScoreReport:
        url = normalize_url(url)
        try:
            with self._lock:
                self.throttle.wait()
            raw = self.extractor.extract(url)
            return analyze_page(url, raw, self.rubric)
        except ExtractionError as e:
            logger.warning("Failed to analyze %s: %s", url, e.reason)
            return failed_report(url, e.reason)
        except Exception as e:
            logger.exception("Unexpected error analyzing %s", url)
            return failed_report(url, f"Error: {e}")

    def run(self, urls: Iterable[str]) -> BatchResult:
        urls = list(urls)
        logger.info("Starting batch analysis for %d URLs", len(urls))

        if self.max_workers > 1 and len(urls) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                reports = list(executor.map(self.analyze, urls))
        else:
            reports = [self.analyze(url) for url in urls]

        result = BatchResult(reports=reports)
        logger.info(
            "Batch complete: %d successful, %d failed",
            len(result.successful), len(result.failed),
        )
        return result
