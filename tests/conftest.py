"""
Pytest configuration and shared fixtures
"""
import pytest

from seo_scorecard.normalizer import normalize


TITLE_45 = "Handmade Oak Tables and Chairs | Oakline Shop"
TITLE_20 = "Oakline Tables - Buy"
DESCRIPTION_140 = ("Solid oak furniture handmade in Vermont. " * 4)[:140]


@pytest.fixture
def ideal_extraction():
    """Extraction that satisfies every rubric check"""
    return {
        "url": "https://oakline.example/tables",
        "seo": {
            "title": TITLE_45,
            "metaDescription": DESCRIPTION_140,
            "canonicalUrl": "https://oakline.example/tables",
            "robots": "index, follow",
        },
        "headings": {
            "h1": ["Handmade Oak Tables"],
            "h2": ["Dining Tables", "Coffee Tables"],
            "h3": ["Care Guide"],
        },
        "images": [
            {"src": "/img/dining.jpg", "alt": "Oak dining table", "width": 1200, "height": 800},
            {"src": "/img/coffee.jpg", "alt": "Oak coffee table", "width": 800, "height": 600},
            {"src": "/img/workshop.jpg", "alt": "Our Vermont workshop"},
        ],
        "links": {
            "internal": [{"url": "/about", "text": "About Us"}],
            "external": [{"url": "https://woodworkers.example", "text": "Guild"}],
        },
        "social": {
            "openGraph": {"title": "Handmade Oak Tables", "image": "/og.jpg"},
            "twitter": {"card": "summary_large_image"},
        },
        "content": {"wordCount": 500, "readingTime": 3, "paragraphs": 9},
        "technical": {"structuredData": [{"@type": "Product"}]},
    }


@pytest.fixture
def sample_extraction():
    """Typical extraction with a short description and one image lacking alt text"""
    return {
        "seo": {
            "title": "Sample Page Title for example.com",
            "metaDescription": "This is a sample meta description for SEO analysis testing.",
            "canonicalUrl": "https://example.com",
            "robots": "index, follow",
        },
        "headings": {
            "h1": ["Main Heading"],
            "h2": ["Section 1", "Section 2"],
            "h3": ["Subsection 1.1", "Subsection 2.1"],
        },
        "images": [
            {"src": "/image1.jpg", "alt": "Sample image 1", "width": 800, "height": 600},
            {"src": "/image2.jpg", "alt": "", "width": 400, "height": 300},
        ],
        "links": {
            "internal": [{"url": "/about", "text": "About Us"}],
            "external": [{"url": "https://example.org", "text": "External Link"}],
        },
        "social": {
            "openGraph": {"title": "OG Title", "description": "OG Description", "image": "/og-image.jpg"},
            "twitter": {"card": "summary_large_image", "title": "Twitter Title"},
        },
        "content": {"wordCount": 450, "readingTime": 2, "paragraphs": 8},
        "technical": {
            "structuredData": ["WebPage", "Organization"],
            "breadcrumbs": ["Home", "Category", "Page"],
        },
    }


@pytest.fixture
def ideal_facts(ideal_extraction):
    return normalize(ideal_extraction)


@pytest.fixture
def sample_facts(sample_extraction):
    return normalize(sample_extraction, url="https://example.com")


@pytest.fixture
def empty_facts():
    return normalize({}, url="https://empty.example")


@pytest.fixture
def make_facts(ideal_extraction):
    """Build facts from the ideal extraction with top-level sections overridden"""
    def _make(**sections):
        raw = dict(ideal_extraction)
        for key, value in sections.items():
            if isinstance(value, dict) and isinstance(raw.get(key), dict):
                raw[key] = {**raw[key], **value}
            else:
                raw[key] = value
        return normalize(raw)
    return _make
