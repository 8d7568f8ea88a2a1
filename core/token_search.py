# =============================================================================
# core/token_search.py  -  Design-Token Tree Walker
# =============================================================================
#
# Depth-first walk over an arbitrary JSON tree.  For every node the walker
# applies two INDEPENDENT checks:
#
#   1. key/path check   - the node's key, or its dotted path from the root,
#                         contains the query
#   2. value check      - the node's value is a string containing the query
#
# caseSensitive folds the key and the value only.  The dotted path is always
# compared lowercased, so a case-sensitive lowercase query such as
# "colors.primary" still finds "Colors.PrimaryRed" through its path.
#
# Both can fire for the same node, which produces two records for it.  That
# duplication is kept as-is; callers see it in the reported total.
#
# Traversal order is the document's own key order (dicts preserve insertion
# order, and json.load preserves file order), so results are deterministic.
# =============================================================================

from typing import Any, Iterator, Mapping

from core.models import SearchMatch, SearchOutcome

DEFAULT_MAX_RESULTS = 20


def _children(node: Any) -> Iterator[tuple[str, Any]]:
    if isinstance(node, Mapping):
        yield from ((str(k), v) for k, v in node.items())
    elif isinstance(node, list):
        yield from ((str(i), v) for i, v in enumerate(node))


def walk_matches(tree: Any, query: str, case_sensitive: bool = False) -> list[SearchMatch]:
    """Every match for ``query`` in ``tree``, in depth-first document order."""
    needle = query if case_sensitive else query.lower()

    def fold(text: str) -> str:
        return text if case_sensitive else text.lower()

    results: list[SearchMatch] = []

    def visit(node: Any, path: list[str]) -> None:
        for key, value in _children(node):
            current = path + [key]
            dotted = ".".join(current)

            if needle in fold(key) or needle in dotted.lower():
                results.append(SearchMatch(path=dotted, key=key, value=value))

            if isinstance(value, str):
                if needle in fold(value):
                    results.append(SearchMatch(path=dotted, key=key, value=value))
            elif isinstance(value, (dict, list)):
                visit(value, current)

    visit(tree, [])
    return results


def search_tree(
    tree: Any,
    query: str,
    case_sensitive: bool = False,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> SearchOutcome:
    """Search ``tree`` and keep at most ``max_results`` matches."""
    matches = walk_matches(tree, query, case_sensitive)
    limit = max(max_results, 0)
    return SearchOutcome(
        query=query,
        total=len(matches),
        matches=matches[:limit],
        has_more=len(matches) > limit,
    )
