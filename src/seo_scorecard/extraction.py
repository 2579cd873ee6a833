"""Clients for the page extraction service."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from .config import DEFAULT_API_URL

logger = logging.getLogger(__name__)


DEFAULT_HEADERS = {
    "User-Agent": "seo-scorecard/1.0",
    "Accept": "application/json",
}

_STRING = {"type": "string"}
_NUMBER = {"type": "number"}
_STRINGS = {"type": "array", "items": _STRING}
_LINKS = {
    "type": "array",
    "items": {
        "type": "object",
        "properties": {"url": _STRING, "text": _STRING, "title": _STRING},
    },
}

EXTRACTION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "seo": {
            "type": "object",
            "properties": {
                "title": _STRING,
                "metaDescription": _STRING,
                "canonicalUrl": _STRING,
                "robots": _STRING,
            },
        },
        "headings": {
            "type": "object",
            "properties": {f"h{i}": _STRINGS for i in range(1, 7)},
        },
        "images": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"src": _STRING, "alt": _STRING, "width": _NUMBER, "height": _NUMBER},
            },
        },
        "links": {
            "type": "object",
            "properties": {"internal": _LINKS, "external": _LINKS},
        },
        "social": {
            "type": "object",
            "properties": {
                "openGraph": {
                    "type": "object",
                    "properties": {
                        k: _STRING for k in ("title", "description", "image", "url", "type", "siteName")
                    },
                },
                "twitter": {
                    "type": "object",
                    "properties": {
                        k: _STRING for k in ("card", "title", "description", "image", "creator")
                    },
                },
            },
        },
        "content": {
            "type": "object",
            "properties": {k: _NUMBER for k in ("wordCount", "readingTime", "paragraphs", "sentences")},
        },
        "technical": {
            "type": "object",
            "properties": {
                "structuredData": {"type": "array"},
                "hreflang": {"type": "array"},
                "breadcrumbs": {"type": "array"},
                "forms": _NUMBER,
                "iframes": _NUMBER,
            },
        },
    },
}

EXTRACTION_PROMPT = (
    "Analyze this webpage for SEO. Extract all SEO meta tags, the H1-H6 heading "
    "hierarchy, images with alt text and dimensions, internal and external links "
    "with anchor text, Open Graph and Twitter Card tags, content metrics, and "
    "technical SEO elements (structured data, hreflang, breadcrumbs)."
)

CACHE_MAX_AGE_MS = 3_600_000


class ExtractionError(Exception):
    """The extraction service could not produce data for a URL."""

    def __init__(self, url: str, reason: str):
        super().__init__(reason)
        self.url = url
        self.reason = reason


def normalize_url(url: str) -> str:
    """Ensure URL has a scheme."""
    url = url.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = "https://" + url
    return url


class Extractor(ABC):
    """Source of raw extraction results."""

    @abstractmethod
    def extract(self, url: str) -> dict[str, Any]:
        """Return the raw extraction mapping for ``url``.

        Raises:
            ExtractionError: if the page could not be extracted.
        """


class FirecrawlExtractor(Extractor):
    """Extracts page facts through the Firecrawl scrape API."""

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _request_body(self, url: str) -> dict[str, Any]:
        return {
            "url": url,
            "formats": ["extract", "markdown"],
            "extract": {"schema": EXTRACTION_SCHEMA, "prompt": EXTRACTION_PROMPT},
            "onlyMainContent": True,
            "maxAge": CACHE_MAX_AGE_MS,
        }

    def _post(self, client: httpx.Client, url: str) -> httpx.Response:
        response = client.post(
            f"{self.api_url}/scrape",
            headers={**DEFAULT_HEADERS, "Authorization": f"Bearer {self.api_key}"},
            json=self._request_body(url),
        )
        response.raise_for_status()
        return response

    def extract(self, url: str) -> dict[str, Any]:
        if not self.is_configured():
            raise ExtractionError(url, "FIRECRAWL_API_KEY not set")

        logger.info("Extracting %s", url)
        try:
            if self._client is not None:
                response = self._post(self._client, url)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = self._post(client, url)
            payload = response.json()
        except httpx.TimeoutException:
            raise ExtractionError(url, f"Timeout after {self.timeout}s")
        except httpx.HTTPStatusError as e:
            raise ExtractionError(url, f"HTTP {e.response.status_code}")
        except httpx.RequestError as e:
            raise ExtractionError(url, f"Request failed: {e}")
        except ValueError:
            raise ExtractionError(url, "Response was not valid JSON")

        return self._unwrap(url, payload)

    def _unwrap(self, url: str, payload: Any) -> dict[str, Any]:
        if not isinstance(payload, dict) or not payload.get("success", True):
            error = payload.get("error") if isinstance(payload, dict) else None
            raise ExtractionError(url, f"Extraction unsuccessful: {error or 'unknown error'}")

        data = payload.get("data", payload)
        if not isinstance(data, dict):
            raise ExtractionError(url, "Extraction response has no data")

        extract = data.get("extract") or data.get("json") or {}
        if not isinstance(extract, dict):
            raise ExtractionError(url, "Extraction response has malformed extract data")

        raw = dict(extract)
        if data.get("markdown"):
            raw.setdefault("markdown", data["markdown"])
        logger.debug("Extracted %d top-level fields for %s", len(raw), url)
        return raw
