"""Turn a loosely shaped extraction result into PageFacts.

The extraction service may omit any field at any depth, send ``null``, or send
a scalar where a list was expected. Everything is coerced here so the rubric
can read fields unconditionally.
"""

import math
from collections.abc import Mapping
from typing import Any, Optional

from .models import (
    ContentMetrics,
    Headings,
    Image,
    LinkRef,
    Links,
    OpenGraph,
    PageFacts,
    SeoMeta,
    Social,
    Technical,
    TwitterCard,
)


def _section(data: Any, *keys: str) -> Mapping:
    """Return the first mapping found under any of ``keys``, else an empty one."""
    if not isinstance(data, Mapping):
        return {}
    for key in keys:
        value = data.get(key)
        if isinstance(value, Mapping):
            return value
    return {}


def _get(data: Mapping, *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return None


def _text(value: Any) -> str:
    if value is None or isinstance(value, (Mapping, list, tuple)):
        return ""
    if isinstance(value, bool):
        return ""
    return str(value)


def _number(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if not isinstance(value, (float, str)):
        return 0
    try:
        number = float(value)
    except (ValueError, OverflowError):
        return 0
    # NaN and infinities cannot become a count
    if not math.isfinite(number):
        return 0
    return max(0, int(number))


def _items(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return [v for v in value if v is not None]
    return []


def _strings(value: Any) -> tuple[str, ...]:
    return tuple(_text(v) for v in _items(value))


def _image(item: Any) -> Optional[Image]:
    if isinstance(item, str):
        return Image(src=item)
    if not isinstance(item, Mapping):
        return None
    return Image(
        src=_text(item.get("src")),
        alt=_text(item.get("alt")),
        width=_number(item.get("width")),
        height=_number(item.get("height")),
    )


def _link(item: Any) -> Optional[LinkRef]:
    if isinstance(item, str):
        return LinkRef(url=item)
    if not isinstance(item, Mapping):
        return None
    return LinkRef(
        url=_text(_get(item, "url", "href")),
        text=_text(item.get("text")),
        title=_text(item.get("title")),
    )


def count_words(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(text.split()) if text else 0


def normalize(raw: Any, url: Optional[str] = None) -> PageFacts:
    """Build PageFacts from a raw extraction result.

    Args:
        raw: Extraction mapping (camelCase keys, snake_case accepted too).
            ``None`` or any non-mapping is treated as an empty extraction.
        url: Page URL. Falls back to ``raw["url"]`` when omitted.

    Returns:
        PageFacts with every absent value replaced by its empty default.
    """
    data = raw if isinstance(raw, Mapping) else {}

    seo_raw = _section(data, "seo", "metadata")
    seo = SeoMeta(
        title=_text(seo_raw.get("title")),
        meta_description=_text(_get(seo_raw, "metaDescription", "meta_description", "description")),
        canonical_url=_text(_get(seo_raw, "canonicalUrl", "canonical_url", "canonical")),
        robots=_text(seo_raw.get("robots")),
    )

    headings_raw = _section(data, "headings")
    headings = Headings(**{
        level: _strings(headings_raw.get(level))
        for level in ("h1", "h2", "h3", "h4", "h5", "h6")
    })

    images = tuple(img for img in (_image(i) for i in _items(data.get("images"))) if img)

    links_raw = _section(data, "links")
    links = Links(
        internal=tuple(link for link in (_link(i) for i in _items(links_raw.get("internal"))) if link),
        external=tuple(link for link in (_link(i) for i in _items(links_raw.get("external"))) if link),
    )

    social_raw = _section(data, "social")
    og_raw = _section(social_raw, "openGraph", "open_graph")
    tw_raw = _section(social_raw, "twitter")
    social = Social(
        open_graph=OpenGraph(
            title=_text(og_raw.get("title")),
            description=_text(og_raw.get("description")),
            image=_text(og_raw.get("image")),
            url=_text(og_raw.get("url")),
            type=_text(og_raw.get("type")),
            site_name=_text(_get(og_raw, "siteName", "site_name")),
        ),
        twitter=TwitterCard(
            card=_text(tw_raw.get("card")),
            title=_text(tw_raw.get("title")),
            description=_text(tw_raw.get("description")),
            image=_text(tw_raw.get("image")),
            creator=_text(tw_raw.get("creator")),
        ),
    )

    content_raw = _section(data, "content")
    word_count = _number(_get(content_raw, "wordCount", "word_count"))
    if not word_count:
        # Extraction services sometimes return the page body but no metrics
        word_count = count_words(_text(data.get("markdown")))
    content = ContentMetrics(
        word_count=word_count,
        reading_time=_number(_get(content_raw, "readingTime", "reading_time")),
        paragraphs=_number(content_raw.get("paragraphs")),
        sentences=_number(content_raw.get("sentences")),
    )

    technical_raw = _section(data, "technical")
    technical = Technical(
        structured_data=tuple(_items(_get(technical_raw, "structuredData", "structured_data"))),
        hreflang=_strings(technical_raw.get("hreflang")),
        breadcrumbs=_strings(technical_raw.get("breadcrumbs")),
        forms=_number(technical_raw.get("forms")),
        iframes=_number(technical_raw.get("iframes")),
    )

    return PageFacts(
        url=url if url is not None else _text(data.get("url")),
        seo=seo,
        headings=headings,
        images=images,
        links=links,
        social=social,
        content=content,
        technical=technical,
    )
