# =============================================================================
# core/css_render.py  -  CSS Rule Renderer
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns subtrees of the design-token document into CSS text.
#
#   render_variables_block()  ->  ":root { ... }" from brands.<id>.css
#   render_component_css()    ->  ".<prefix>-<component> { ... }" plus an
#                                 optional ":hover" block from cssRules.<id>
#   render_stylesheet()       ->  header + variables + components, the body
#                                 of the generate_css tool
#
# WHY TWO PASSES FOR COMPONENTS?
#   A pseudo-class cannot live inside a flat declaration body, so the base
#   declarations and the hover declarations are emitted as separate rules.
#
# All functions here are pure: same input, same CSS.  The only exception is
# the "Generated:" timestamp, and that can be passed in.
# =============================================================================

from datetime import datetime, timezone
from typing import Iterable, Mapping

from core.design_tokens import NON_VARIABLE_CATEGORIES

DEFAULT_COMPONENTS = ("buttons", "cards", "modals")

INDENT = "  "


def _is_scalar(value) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def render_variables_block(categories: Mapping[str, Mapping]) -> str:
    """Render ``{category: {var: value}}`` as a single ``:root`` block.

    Categories keep document order.  ``fontFiles`` is skipped, and so is
    anything inside a category that is not a plain scalar.
    """
    lines = [":root {"]
    for category, variables in categories.items():
        if category in NON_VARIABLE_CATEGORIES or not isinstance(variables, Mapping):
            continue
        lines.append(f"{INDENT}/* {category} */")
        for name, value in variables.items():
            if _is_scalar(value):
                lines.append(f"{INDENT}{name}: {value};")
        lines.append("")
    lines.append("}")
    return "\n".join(lines) + "\n"


def _base_declarations(rules: Mapping) -> list[str]:
    # Single-level walk: a "css" string on the component itself, or on any
    # direct child block.  "hover" belongs to the second pass.
    declarations = []
    for key, value in rules.items():
        if key == "hover":
            continue
        if key == "css" and isinstance(value, str):
            declarations.append(value)
        elif isinstance(value, Mapping) and isinstance(value.get("css"), str):
            declarations.append(value["css"])
    return declarations


def render_component_css(component: str, rules: Mapping, prefix: str) -> str:
    """Render one component rule tree as CSS with a brand-prefixed class."""
    selector = f".{prefix}-{component}"
    out = f"{selector} {{\n"
    for declaration in _base_declarations(rules):
        out += f"{INDENT}{declaration}\n"
    out += "}\n"

    hover = rules.get("hover")
    if isinstance(hover, Mapping):
        out += f"\n{selector}:hover {{\n"
        if isinstance(hover.get("css"), str):
            out += f"{INDENT}{hover['css']}\n"
        out += "}\n"

    return out


def section_title(component: str) -> str:
    """Capitalize only the first letter: "mediaQueries" -> "MediaQueries"."""
    return component[:1].upper() + component[1:]


def iso_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp with millisecond precision and a trailing Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_stylesheet(
    brand_id: str,
    brand: Mapping,
    css_rules: Mapping,
    components: Iterable[str] | None = None,
    generated_at: datetime | None = None,
) -> tuple[str, list[str]]:
    """Build the full stylesheet for one brand.

    Returns:
        (css_text, skipped) where ``skipped`` lists requested components that
        the document has no rules for.
    """
    css = f"/* {brand.get('name', brand_id)} - Complete Stylesheet */\n"
    css += f"/* Generated: {iso_timestamp(generated_at)} */\n\n"

    css += "/* ========== CSS Variables ========== */\n"
    variables = brand.get("css")
    css += render_variables_block(variables if isinstance(variables, Mapping) else {})
    css += "\n"

    skipped = []
    for component in (DEFAULT_COMPONENTS if components is None else components):
        rules = css_rules.get(component)
        if not isinstance(rules, Mapping):
            skipped.append(component)
            continue
        css += f"/* ========== {section_title(component)} ========== */\n"
        css += render_component_css(component, rules, brand_id)
        css += "\n"

    return css, skipped
