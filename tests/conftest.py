"""Shared fixtures: a small design-token document and a canned-response fetcher."""

import copy

import pytest

from core.design_tokens import DesignTokenDocument
from core.fetcher import FetchError

TOKENS = {
    "brands": {
        "pmc": {
            "name": "Pan-Mass Challenge",
            "shortName": "PMC",
            "css": {
                "colors": {"primary": "#AB292C", "--pmc-secondary": "#1D3C6E"},
                "borderRadius": {"--pmc-radius-md": "8px"},
                "fontFiles": {"montserrat": "https://fonts.example/montserrat.css"},
            },
            "sassVariables": {"$pmc-primary": "#AB292C"},
            "assets": {"logo": "https://www.pmc.org/logo.svg"},
        },
        "unpaved": {
            "name": "Unpaved",
            "shortName": "Unpaved",
        },
    },
    "cssRules": {
        "buttons": {
            "base": {"css": "padding: 0.75rem 1.5rem;"},
            "shape": {"css": "border-radius: 8px;"},
            "hover": {"css": "filter: brightness(0.9);"},
        },
        "cards": {
            "css": "padding: 1.5rem;",
            "shadow": {"css": "box-shadow: 0 1px 2px #000;"},
        },
        "modals": {"dialog": {"css": "max-width: 600px;"}},
        "spacing": {"scale": {"sm": "0.5rem", "md": "1rem"}},
    },
    "usage": {
        "colors": {"primary": "Use for calls to action."},
        "accessibility": {"contrast": "4.5:1 for body text."},
    },
}

SITEMAP_XML = """<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
  <url><loc>https://www.pmc.org/</loc></url>
  <url><loc>https://www.pmc.org/events/ride-2026</loc></url>
  <url><loc>https://www.pmc.org/Event/Kids-Ride</loc></url>
  <url><loc>https://www.pmc.org/about</loc></url>
  <url><loc>https://www.pmc.org/events/ride-2026</loc></url>
</urlset>
"""


class FakeFetch:
    """Async stand-in for core.fetcher.fetch_content.

    Returns the body registered for a URL, raises FetchError for URLs
    registered as failing, and records every requested URL.
    """

    def __init__(self, pages=None, failing=()):
        self.pages = dict(pages or {})
        self.failing = set(failing)
        self.calls: list[str] = []

    async def __call__(self, url: str) -> str:
        self.calls.append(url)
        if url in self.failing:
            raise FetchError(url, "HTTP status 503")
        if url not in self.pages:
            raise FetchError(url, "HTTP status 404")
        return self.pages[url]


@pytest.fixture
def tokens() -> dict:
    return copy.deepcopy(TOKENS)


@pytest.fixture
def document(tokens) -> DesignTokenDocument:
    return DesignTokenDocument.from_dict(tokens)


@pytest.fixture
def fake_fetch() -> FakeFetch:
    return FakeFetch(pages={
        "https://www.pmc.org/sitemap.xml": SITEMAP_XML,
        "https://www.unpaved.org/sitemap.xml": "<html>not a sitemap</html>",
    })


@pytest.fixture
def make_fetch():
    return FakeFetch


@pytest.fixture
def sitemap_xml() -> str:
    return SITEMAP_XML
