"""Data models for page facts and score reports."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Severity(Enum):
    """Severity level for detected issues."""
    CRITICAL = "critical"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class IssueKind(Enum):
    """What kind of deficiency an issue describes."""
    MISSING_TITLE = "missing_title"
    TITLE_LENGTH = "title_length"
    MISSING_META_DESCRIPTION = "missing_meta_description"
    META_DESCRIPTION_LENGTH = "meta_description_length"
    MISSING_H1 = "missing_h1"
    MULTIPLE_H1 = "multiple_h1"
    THIN_CONTENT = "thin_content"
    NO_IMAGES = "no_images"
    MISSING_ALT_TEXT = "missing_alt_text"
    MISSING_OPEN_GRAPH = "missing_open_graph"
    MISSING_TWITTER_CARD = "missing_twitter_card"
    MISSING_CANONICAL = "missing_canonical"
    NO_STRUCTURED_DATA = "no_structured_data"
    MISSING_ROBOTS = "missing_robots"
    WEAK_LINKING = "weak_linking"
    HEADING_HIERARCHY = "heading_hierarchy"
    EXTRACTION_FAILED = "extraction_failed"


# --- Page facts (normalized input) ---


@dataclass(frozen=True)
class SeoMeta:
    title: str = ""
    meta_description: str = ""
    canonical_url: str = ""
    robots: str = ""


@dataclass(frozen=True)
class Headings:
    h1: tuple[str, ...] = ()
    h2: tuple[str, ...] = ()
    h3: tuple[str, ...] = ()
    h4: tuple[str, ...] = ()
    h5: tuple[str, ...] = ()
    h6: tuple[str, ...] = ()


@dataclass(frozen=True)
class Image:
    src: str = ""
    alt: str = ""
    width: int = 0
    height: int = 0

    @property
    def has_alt(self) -> bool:
        """Whitespace-only alt text counts as missing."""
        return bool(self.alt.strip())


@dataclass(frozen=True)
class LinkRef:
    url: str = ""
    text: str = ""
    title: str = ""


@dataclass(frozen=True)
class Links:
    internal: tuple[LinkRef, ...] = ()
    external: tuple[LinkRef, ...] = ()

    @property
    def total(self) -> int:
        return len(self.internal) + len(self.external)


@dataclass(frozen=True)
class OpenGraph:
    title: str = ""
    description: str = ""
    image: str = ""
    url: str = ""
    type: str = ""
    site_name: str = ""


@dataclass(frozen=True)
class TwitterCard:
    card: str = ""
    title: str = ""
    description: str = ""
    image: str = ""
    creator: str = ""


@dataclass(frozen=True)
class Social:
    open_graph: OpenGraph = field(default_factory=OpenGraph)
    twitter: TwitterCard = field(default_factory=TwitterCard)


@dataclass(frozen=True)
class ContentMetrics:
    word_count: int = 0
    reading_time: int = 0
    paragraphs: int = 0
    sentences: int = 0


@dataclass(frozen=True)
class Technical:
    structured_data: tuple[Any, ...] = ()
    hreflang: tuple[str, ...] = ()
    breadcrumbs: tuple[str, ...] = ()
    forms: int = 0
    iframes: int = 0


@dataclass(frozen=True)
class PageFacts:
    """Fully defaulted view of one page's extraction result."""
    url: str = ""
    seo: SeoMeta = field(default_factory=SeoMeta)
    headings: Headings = field(default_factory=Headings)
    images: tuple[Image, ...] = ()
    links: Links = field(default_factory=Links)
    social: Social = field(default_factory=Social)
    content: ContentMetrics = field(default_factory=ContentMetrics)
    technical: Technical = field(default_factory=Technical)


# --- Score report (output) ---


@dataclass(frozen=True)
class Issue:
    """A detected deficiency."""
    kind: IssueKind
    message: str
    severity: Severity


@dataclass(frozen=True)
class Recommendation:
    """An actionable fix, lower priority numbers come first."""
    priority: int
    action: str
    impact: str


@dataclass(frozen=True)
class CheckResult:
    """Result of a single rubric check."""
    name: str
    score: int
    max_score: int
    issues: tuple[Issue, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()

    @property
    def passed(self) -> bool:
        return self.score == self.max_score


@dataclass(frozen=True)
class ScoreReport:
    """Complete score report for a page."""
    url: str
    overall_score: int
    grade: str
    issues: tuple[Issue, ...] = ()
    recommendations: tuple[Recommendation, ...] = ()
    h1_count: int = 0
    h2_count: int = 0
    image_count: int = 0
    link_count: int = 0
    word_count: int = 0
    checks: tuple[CheckResult, ...] = ()
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def issues_by_severity(self, severity: Severity) -> list[Issue]:
        return [i for i in self.issues if i.severity == severity]


@dataclass(frozen=True)
class QuickReport:
    """Presence-only score for a fast first look at a page."""
    url: str
    title: str
    meta_description: str
    h1_count: int
    image_count: int
    word_count: int
    quick_score: int
    grade: str
