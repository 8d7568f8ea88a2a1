"""Tests for core.token_search, the design-token tree walker."""

from core.token_search import search_tree, walk_matches


class TestWalkMatches:
    def test_value_match_returns_the_string_value(self, tokens):
        matches = walk_matches(tokens, "AB292C")
        assert [m.path for m in matches] == [
            "brands.pmc.css.colors.primary",
            "brands.pmc.sassVariables.$pmc-primary",
        ]
        assert matches[0].key == "primary"
        assert matches[0].value == "#AB292C"

    def test_key_match(self, tokens):
        paths = [m.path for m in walk_matches(tokens, "primary")]
        assert paths == [
            "brands.pmc.css.colors.primary",
            "brands.pmc.sassVariables.$pmc-primary",
            "usage.colors.primary",
        ]

    def test_path_match_covers_the_whole_subtree(self, tokens):
        paths = [m.path for m in walk_matches(tokens, "css.colors")]
        assert paths == [
            "brands.pmc.css.colors",
            "brands.pmc.css.colors.primary",
            "brands.pmc.css.colors.--pmc-secondary",
        ]

    def test_key_and_value_match_produce_two_records(self):
        # Observed behavior, kept on purpose: one node, two records.
        matches = walk_matches({"radius": "radius-md"}, "radius")
        assert len(matches) == 2
        assert matches[0] == matches[1]

    def test_depth_first_document_order(self):
        tree = {"a": {"x": "hit", "b": {"x": "hit"}}, "c": {"x": "hit"}}
        assert [m.path for m in walk_matches(tree, "hit")] == ["a.x", "a.b.x", "c.x"]

    def test_case_sensitive(self, tokens):
        assert walk_matches(tokens, "ab292c", case_sensitive=True) == []
        assert len(walk_matches(tokens, "AB292C", case_sensitive=True)) == 2

    def test_case_sensitive_query_still_matches_the_lowercased_path(self):
        tree = {"Colors": {"PrimaryRed": "#AB292C"}}
        matches = walk_matches(tree, "colors.primary", case_sensitive=True)
        assert [m.path for m in matches] == ["Colors.PrimaryRed"]

    def test_case_sensitive_key_match_is_not_folded(self):
        tree = {"Primary": "#AB292C"}
        assert walk_matches(tree, "PRIMARY", case_sensitive=True) == []
        assert [m.key for m in walk_matches(tree, "Primary", case_sensitive=True)] == ["Primary"]

    def test_lists_are_walked_by_index(self):
        tree = {"pairs": [{"bg": "#fff"}, {"bg": "#000"}]}
        matches = walk_matches(tree, "#000")
        assert [(m.path, m.key) for m in matches] == [("pairs.1.bg", "bg")]

    def test_non_string_scalars_are_not_value_matched(self):
        assert walk_matches({"size": 44, "on": True, "none": None}, "44") == []


class TestSearchTree:
    def test_no_results(self, tokens):
        outcome = search_tree(tokens, "nonexistent-xyz")
        assert outcome.total == 0
        assert outcome.matches == []
        assert outcome.has_more is False

    def test_truncation_is_reported_separately_from_total(self, tokens):
        outcome = search_tree(tokens, "AB292C", max_results=1)
        assert outcome.total == 2
        assert len(outcome.matches) == 1
        assert outcome.has_more is True

    def test_exact_fit_is_not_truncated(self, tokens):
        outcome = search_tree(tokens, "AB292C", max_results=2)
        assert outcome.has_more is False
