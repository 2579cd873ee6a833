"""Configuration for seo-scorecard, read from the environment."""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_API_URL = "https://api.firecrawl.dev/v1"


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass
class Settings:
    """Runtime settings; defaults are overridden by environment variables."""

    # Extraction service
    api_key: Optional[str] = field(default_factory=lambda: os.getenv("FIRECRAWL_API_KEY"))
    api_url: str = field(default_factory=lambda: os.getenv("FIRECRAWL_API_URL", DEFAULT_API_URL))
    timeout: float = field(default_factory=lambda: _env_float("SEO_SCORECARD_TIMEOUT", 30.0))

    # Rate limiting between extraction calls in a batch
    request_delay: float = field(default_factory=lambda: _env_float("SEO_SCORECARD_REQUEST_DELAY", 2.0))

    # Reporting
    report_directory: str = field(default_factory=lambda: os.getenv("SEO_SCORECARD_REPORT_DIR", "reports"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("SEO_SCORECARD_LOG_LEVEL", "WARNING"))
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings, level: Optional[str] = None) -> None:
    """Configure root logging once for command-line use."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.WARNING),
        format=settings.log_format,
    )
