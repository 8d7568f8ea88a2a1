# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that
# flows between the core/ logic and the tools/ wrappers.  They carry almost
# no behavior.
#
# THE ENVELOPE:
#   Every tool answers with the same envelope:
#       {"content": [{"type": "text", "text": ...}], "isError": bool}
#   ToolReply is the core-side version of it.  Callers branch on is_error,
#   never on the wording of the text.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Callable, Optional


# -----------------------------------------------------------------------------
# ToolReply - the result of one tool invocation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolReply:
    """Text payload plus an error flag, the uniform tool result."""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolReply":
        return cls(text=text)

    @classmethod
    def error(cls, text: str) -> "ToolReply":
        return cls(text=text, is_error=True)

    def to_envelope(self) -> dict:
        """Render the reply in the MCP CallToolResult wire shape."""
        return {
            "content": [{"type": "text", "text": self.text}],
            "isError": self.is_error,
        }


# -----------------------------------------------------------------------------
# EventSite - one entry of the Site Registry
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class EventSite:
    """A remote event website whose sitemap can be queried."""

    name: str                          # "Pan-Mass Challenge"
    base_url: str                      # "https://www.pmc.org" (no trailing slash)
    sitemap_path: str = "/sitemap.xml"

    @property
    def sitemap_url(self) -> str:
        return f"{self.base_url}{self.sitemap_path}"


# -----------------------------------------------------------------------------
# SearchMatch - one record produced by the design-token tree walker
# -----------------------------------------------------------------------------
# The same node may appear twice: once because its key/path matched and once
# because its string value matched.  The walker does not deduplicate.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class SearchMatch:
    path: str                          # "brands.pmc.css.colors.--pmc-primary"
    key: str                           # "--pmc-primary"
    value: Any                         # "#AB292C", or a whole subtree


@dataclass
class SearchOutcome:
    """All matches for a query, plus the truncated view that gets reported."""

    query: str
    total: int
    matches: list[SearchMatch] = field(default_factory=list)
    has_more: bool = False             # True when total > number of matches kept


# -----------------------------------------------------------------------------
# BrandSummary - what list_brands reports per brand
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class BrandSummary:
    id: str
    name: str
    short_name: Optional[str]
    has_css: bool
    has_sass_variables: bool
    has_assets: bool


# -----------------------------------------------------------------------------
# Progress - receives intermediate status lines while a tool runs
# -----------------------------------------------------------------------------
Progress = Callable[[str], None]


def no_progress(message: str) -> None:
    """Default Progress: discard the message."""
