# =============================================================================
# core/sitemap.py  -  Sitemap Parser & Text Extractor
# =============================================================================
#
# Two small text transforms used by the event-site tools.
#
# parse_sitemap():
#   A permissive scan for <loc>...</loc> pairs, NOT a validating XML parse.
#   Malformed XML never raises; it just yields fewer (or zero) URLs.
#   Order is document order, duplicates are kept, nothing is normalized.
#
# extract_text_from_html():
#   Turns a page into a plain-text approximation.  The steps run in a fixed
#   order: script/style blocks go first, otherwise their code would survive
#   the tag stripping as visible text.
# =============================================================================

import re

_LOC_RE = re.compile(r"<loc>(.*?)</loc>")

# The body may contain "<" (e.g. "if (a < b)") as long as it does not start
# the closing tag.
_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

# Exactly these six; anything else passes through literally.
# &amp; is decoded after &nbsp; so "&amp;nbsp;" becomes "&nbsp;", not " ".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def parse_sitemap(xml: str) -> list[str]:
    """Return every string found between <loc> and </loc>, in document order."""
    return _LOC_RE.findall(xml)


def extract_text_from_html(html: str) -> str:
    """Strip markup from ``html`` and return collapsed, trimmed text."""
    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)

    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)

    return _WHITESPACE_RE.sub(" ", text).strip()
