# =============================================================================
# core/design_queries.py  -  Design-Token Query Dispatcher
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the seven design-token tools as methods on DesignQueries:
#
#     list_brands              - brand ids, names, which sections exist
#     get_brand_styles         - one brand, as JSON or as a CSS variable block
#     get_css_variables        - one brand's variables, optionally one category
#     get_css_rules            - one component's rule tree, JSON or CSS
#     generate_css             - a complete stylesheet for one brand
#     search_design_standards  - substring search over the whole document
#     get_usage_guidelines     - the usage section, whole or one category
#
# DEPENDENCY INJECTION:
#   The DesignTokenDocument is passed in once, at construction.  There is no
#   module-level global, so tests build a DesignQueries around a tiny fixture
#   document without bootstrapping a server.
#   `progress` receives intermediate status lines (match counts, skipped
#   components); the MCP server wires it to log_status.
#
# THE BOUNDARY RULE:
#   Like EventQueries, nothing here raises past the method.  Unknown keys and
#   unexpected exceptions both come back as ToolReply.error(...).
# =============================================================================

import functools
import json
import logging
from datetime import datetime
from typing import Any, Callable, Iterable

from core.css_render import render_component_css, render_stylesheet, render_variables_block
from core.design_tokens import DesignTokenDocument
from core.models import BrandSummary, Progress, SearchOutcome, ToolReply, no_progress
from core.token_search import DEFAULT_MAX_RESULTS, search_tree

logger = logging.getLogger(__name__)

# Components whose rule trees are shaped for class rendering.  Every other
# component is always returned as JSON.
CSS_RENDERABLE_COMPONENTS = frozenset({"buttons", "cards", "modals"})

DEFAULT_COMPONENT_PREFIX = "component"

USAGE_ALL = "all"


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _present(value: Any) -> bool:
    # An empty section still counts as present; only missing/null/blank don't.
    return isinstance(value, (dict, list)) or bool(value)


def _json_bool(flag: bool) -> str:
    return "true" if flag else "false"


def _boundary(method: Callable[..., ToolReply]) -> Callable[..., ToolReply]:
    """Turn any unexpected exception into an error reply."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs) -> ToolReply:
        try:
            return method(self, *args, **kwargs)
        except Exception as exc:
            logger.exception("%s failed unexpectedly", method.__name__)
            return ToolReply.error(f"Error: {exc}")

    return wrapper


class DesignQueries:
    """Stateless handlers for the design-token tools."""

    def __init__(self, document: DesignTokenDocument, progress: Progress = no_progress):
        self.document = document
        self._progress = progress

    @property
    def valid_brands(self) -> str:
        return ", ".join(self.document.brand_ids)

    # -------------------------------------------------------------------------
    # list_brands
    # -------------------------------------------------------------------------
    def brand_summaries(self) -> list[BrandSummary]:
        summaries = []
        for brand_id, brand in self.document.brands.items():
            brand = brand if isinstance(brand, dict) else {}
            summaries.append(BrandSummary(
                id=brand_id,
                name=brand.get("name", brand_id),
                short_name=brand.get("shortName"),
                has_css=_present(brand.get("css")),
                has_sass_variables=_present(brand.get("sassVariables")),
                has_assets=_present(brand.get("assets")),
            ))
        return summaries

    @_boundary
    def list_brands(self) -> ToolReply:
        summaries = self.brand_summaries()
        lines = [
            f"- {b.id}: {b.name} ({b.short_name})\n"
            f"  CSS: {_json_bool(b.has_css)}, SASS: {_json_bool(b.has_sass_variables)}, "
            f"Assets: {_json_bool(b.has_assets)}"
            for b in summaries
        ]
        return ToolReply.ok(f"Available brands ({len(summaries)}):\n\n" + "\n".join(lines))

    # -------------------------------------------------------------------------
    # get_brand_styles
    # -------------------------------------------------------------------------
    @_boundary
    def get_brand_styles(self, brand: str, format: str = "json") -> ToolReply:
        brand_data = self.document.brand(brand)
        if brand_data is None:
            return ToolReply.error(
                f'Error: Unknown brand "{brand}". Valid brands are: {self.valid_brands}'
            )

        if format != "css":
            return ToolReply.ok(_to_json(brand_data))

        css = f"/* {brand_data.get('name', brand)} - Design Standards */\n\n"
        if isinstance(brand_data.get("css"), dict):
            css += "/* CSS Variables */\n"
            css += render_variables_block(brand_data["css"])
        return ToolReply.ok(css)

    # -------------------------------------------------------------------------
    # get_css_variables
    # -------------------------------------------------------------------------
    @_boundary
    def get_css_variables(
        self,
        brand: str,
        category: str | None = None,
        format: str = "json",
    ) -> ToolReply:
        brand_data = self.document.brand(brand)
        if brand_data is None or not isinstance(brand_data.get("css"), dict):
            return ToolReply.error(f'Error: No CSS data for brand "{brand}"')

        css_data = brand_data["css"]
        if category:
            if category not in css_data:
                available = ", ".join(css_data.keys())
                return ToolReply.error(
                    f'Error: Unknown category "{category}" for brand "{brand}". '
                    f"Available categories: {available}"
                )
            css_data = {category: css_data[category]}

        if format == "css":
            return ToolReply.ok(render_variables_block(css_data))
        return ToolReply.ok(_to_json(css_data))

    # -------------------------------------------------------------------------
    # get_css_rules
    # -------------------------------------------------------------------------
    @_boundary
    def get_css_rules(
        self,
        component: str,
        format: str = "json",
        brand: str | None = None,
    ) -> ToolReply:
        rules = self.document.component_rules(component)
        if rules is None:
            return ToolReply.error(f'Error: Unknown component "{component}"')

        if format == "css" and component in CSS_RENDERABLE_COMPONENTS:
            prefix = brand or DEFAULT_COMPONENT_PREFIX
            return ToolReply.ok(render_component_css(component, rules, prefix))
        return ToolReply.ok(_to_json(rules))

    # -------------------------------------------------------------------------
    # generate_css
    # -------------------------------------------------------------------------
    @_boundary
    def generate_css(
        self,
        brand: str,
        include_components: Iterable[str] | None = None,
        generated_at: datetime | None = None,
    ) -> ToolReply:
        brand_data = self.document.brand(brand)
        if brand_data is None:
            return ToolReply.error(f'Error: Unknown brand "{brand}"')

        components = list(include_components) if include_components is not None else None
        css, skipped = render_stylesheet(
            brand,
            brand_data,
            self.document.css_rules,
            components,
            generated_at=generated_at,
        )
        if skipped:
            logger.info("generate_css(%s): no rules for %s, skipped", brand, ", ".join(skipped))
            self._progress(f"Skipped components without rules: {', '.join(skipped)}")
        self._progress(f"Rendered stylesheet for {brand} ({len(css)} characters)")
        return ToolReply.ok(css)

    # -------------------------------------------------------------------------
    # search_design_standards
    # -------------------------------------------------------------------------
    def search(
        self,
        query: str,
        case_sensitive: bool = False,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> SearchOutcome:
        return search_tree(self.document.root, query, case_sensitive, max_results)

    @_boundary
    def search_design_standards(
        self,
        query: str,
        case_sensitive: bool = False,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> ToolReply:
        outcome = self.search(query, case_sensitive, max_results)
        self._progress(f"{outcome.total} matches, reporting {len(outcome.matches)}")
        if outcome.total == 0:
            return ToolReply.ok(f'No results found for "{query}"')

        noun = "result" if outcome.total == 1 else "results"
        header = f'Found {outcome.total} {noun} for "{query}"'
        if outcome.has_more:
            header += f" (showing first {max_results})"

        records = [
            f"Path: {m.path}\nValue: {m.value if isinstance(m.value, str) else _to_json(m.value)}"
            for m in outcome.matches
        ]
        return ToolReply.ok(f"{header}:\n\n" + "\n\n---\n\n".join(records))

    # -------------------------------------------------------------------------
    # get_usage_guidelines
    # -------------------------------------------------------------------------
    @_boundary
    def get_usage_guidelines(self, category: str = USAGE_ALL) -> ToolReply:
        usage = self.document.usage
        if category == USAGE_ALL:
            return ToolReply.ok(_to_json(usage))
        if category not in usage:
            available = ", ".join(usage.keys())
            return ToolReply.error(
                f'Error: Unknown usage category "{category}". Available: {available}'
            )
        return ToolReply.ok(_to_json({category: usage[category]}))
