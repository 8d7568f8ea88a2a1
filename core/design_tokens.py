# =============================================================================
# core/design_tokens.py  -  Design-Token Document
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Loads the JSON document of brand tokens (CSS variables, component rules,
#   usage guidance) ONCE, and wraps it in an immutable value that is handed
#   to every design-token handler at construction time.
#
# LIFECYCLE:
#   Read at process start, never mutated, never reloaded.  Editing the JSON
#   file requires a restart.  If loading fails the design server cannot do
#   anything useful, so DocumentLoadError is treated as fatal by main.py.
#
# DOCUMENT SHAPE (informal):
#   {
#     "brands":   {brand_id: {name, shortName, css?, sassVariables?, assets?}},
#     "cssRules": {component_id: {... {"css": "..."} leaves, "hover": {...}}},
#     "usage":    {category: ...}
#   }
# =============================================================================

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

DEFAULT_DOCUMENT_PATH = Path(__file__).resolve().parent / "data" / "Designstandards.json"

# Categories under brands.<id>.css that are not emitted as CSS variables.
NON_VARIABLE_CATEGORIES = frozenset({"fontFiles"})


class DocumentLoadError(Exception):
    """The design-token document is missing, unreadable, or malformed."""


@dataclass(frozen=True)
class DesignTokenDocument:
    """Read-only view over the parsed design-token JSON tree.

    from_dict() takes a private deep copy and exposes the top level through a
    MappingProxyType, so neither the caller's dict nor the section table can
    be changed afterwards.  The sections themselves are handed out as plain
    dicts for json.dumps and are treated as read-only by every handler.
    """

    root: Mapping[str, Any]

    @property
    def brands(self) -> dict:
        return self.root["brands"]

    @property
    def css_rules(self) -> dict:
        return self.root["cssRules"]

    @property
    def usage(self) -> dict:
        return self.root.get("usage", {})

    def brand(self, brand_id: str) -> dict | None:
        value = self.brands.get(brand_id)
        return value if isinstance(value, dict) else None

    def component_rules(self, component: str) -> dict | None:
        value = self.css_rules.get(component)
        return value if isinstance(value, dict) else None

    @property
    def brand_ids(self) -> list[str]:
        return list(self.brands.keys())

    @classmethod
    def from_dict(cls, data: Any, source: str = "<memory>") -> "DesignTokenDocument":
        if not isinstance(data, dict):
            raise DocumentLoadError(f"{source}: top level must be a JSON object")
        for required in ("brands", "cssRules"):
            if not isinstance(data.get(required), dict):
                raise DocumentLoadError(f"{source}: missing or invalid '{required}' section")
        if "usage" in data and not isinstance(data["usage"], dict):
            raise DocumentLoadError(f"{source}: 'usage' must be a JSON object")
        return cls(root=MappingProxyType(copy.deepcopy(data)))


def load_document(path: str | Path | None = None) -> DesignTokenDocument:
    """Read and validate the design-token JSON file.

    Args:
        path: Location of the JSON file.  Defaults to the copy shipped in
            core/data/.

    Raises:
        DocumentLoadError: when the file cannot be read or parsed, or lacks
            the ``brands`` / ``cssRules`` sections.
    """
    doc_path = Path(path) if path is not None else DEFAULT_DOCUMENT_PATH
    try:
        with open(doc_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise DocumentLoadError(f"cannot read {doc_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"invalid JSON in {doc_path}: {exc}") from exc

    return DesignTokenDocument.from_dict(data, source=str(doc_path))
