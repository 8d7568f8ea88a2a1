"""Tests for core.design_queries, the seven design-token tools."""

import json
from datetime import datetime, timezone

import pytest

from core import design_queries
from core.design_queries import DesignQueries
from core.models import ToolReply


@pytest.fixture
def queries(document) -> DesignQueries:
    return DesignQueries(document)


class TestToolReply:
    def test_envelope_shape(self):
        assert ToolReply.ok("hi").to_envelope() == {
            "content": [{"type": "text", "text": "hi"}],
            "isError": False,
        }
        assert ToolReply.error("Error: x").to_envelope()["isError"] is True


class TestListBrands:
    def test_lists_every_brand_with_section_flags(self, queries):
        reply = queries.list_brands()
        assert not reply.is_error
        assert reply.text == (
            "Available brands (2):\n\n"
            "- pmc: Pan-Mass Challenge (PMC)\n"
            "  CSS: true, SASS: true, Assets: true\n"
            "- unpaved: Unpaved (Unpaved)\n"
            "  CSS: false, SASS: false, Assets: false"
        )


class TestGetBrandStyles:
    def test_json(self, queries, tokens):
        reply = queries.get_brand_styles("pmc")
        assert json.loads(reply.text) == tokens["brands"]["pmc"]

    def test_css(self, queries):
        reply = queries.get_brand_styles("pmc", format="css")
        assert reply.text.startswith(
            "/* Pan-Mass Challenge - Design Standards */\n\n/* CSS Variables */\n:root {\n"
        )
        assert "  primary: #AB292C;\n" in reply.text

    def test_css_for_brand_without_variables(self, queries):
        assert queries.get_brand_styles("unpaved", format="css").text == "/* Unpaved - Design Standards */\n\n"

    def test_unknown_brand_is_an_error_not_an_exception(self, queries):
        reply = queries.get_brand_styles("unknown")
        assert reply.is_error
        assert reply.text == 'Error: Unknown brand "unknown". Valid brands are: pmc, unpaved'


class TestGetCssVariables:
    def test_all_categories_json(self, queries, tokens):
        reply = queries.get_css_variables("pmc")
        assert json.loads(reply.text) == tokens["brands"]["pmc"]["css"]

    def test_single_category(self, queries):
        reply = queries.get_css_variables("pmc", category="colors")
        assert json.loads(reply.text) == {"colors": {"primary": "#AB292C", "--pmc-secondary": "#1D3C6E"}}

    def test_single_category_css(self, queries):
        reply = queries.get_css_variables("pmc", category="borderRadius", format="css")
        assert reply.text == ":root {\n  /* borderRadius */\n  --pmc-radius-md: 8px;\n\n}\n"

    def test_font_files_never_rendered_as_css(self, queries):
        assert queries.get_css_variables("pmc", category="fontFiles", format="css").text == ":root {\n}\n"

    def test_missing_category(self, queries):
        reply = queries.get_css_variables("pmc", category="boxShadow")
        assert reply.is_error
        assert 'Unknown category "boxShadow"' in reply.text

    def test_brand_without_css(self, queries):
        reply = queries.get_css_variables("unpaved")
        assert reply.is_error
        assert reply.text == 'Error: No CSS data for brand "unpaved"'


class TestGetCssRules:
    def test_json(self, queries, tokens):
        assert json.loads(queries.get_css_rules("buttons").text) == tokens["cssRules"]["buttons"]

    def test_css_with_default_prefix(self, queries):
        text = queries.get_css_rules("buttons", format="css").text
        assert text.startswith(".component-buttons {\n")
        assert ".component-buttons:hover {" in text

    def test_css_with_brand_prefix(self, queries):
        assert queries.get_css_rules("modals", format="css", brand="pmc").text == (
            ".pmc-modals {\n  max-width: 600px;\n}\n"
        )

    def test_non_class_component_falls_back_to_json(self, queries, tokens):
        reply = queries.get_css_rules("spacing", format="css", brand="pmc")
        assert json.loads(reply.text) == tokens["cssRules"]["spacing"]

    def test_unknown_component(self, queries):
        reply = queries.get_css_rules("typography")
        assert reply.is_error
        assert reply.text == 'Error: Unknown component "typography"'


class TestGenerateCss:
    def test_default_components(self, queries):
        reply = queries.generate_css("pmc")
        assert not reply.is_error
        text = reply.text
        assert text.index(":root {") < text.index(".pmc-buttons {") < text.index(".pmc-buttons:hover {")
        assert ".pmc-cards {" in text
        assert ".pmc-modals {" in text

    def test_requested_components_only(self, queries):
        text = queries.generate_css(
            "pmc", ["cards"], generated_at=datetime(2026, 5, 1, tzinfo=timezone.utc)
        ).text
        assert "/* Generated: 2026-05-01T00:00:00.000Z */" in text
        assert ".pmc-cards {" in text
        assert ".pmc-buttons" not in text

    def test_unknown_brand(self, queries):
        reply = queries.generate_css("nope")
        assert reply.is_error
        assert reply.text == 'Error: Unknown brand "nope"'

    def test_unexpected_failure_is_contained(self, queries, monkeypatch):
        def explode(*args, **kwargs):
            raise ValueError("renderer exploded")

        monkeypatch.setattr(design_queries, "render_stylesheet", explode)
        reply = queries.generate_css("pmc")
        assert reply.is_error
        assert reply.text == "Error: renderer exploded"


class TestSearchDesignStandards:
    def test_color_value(self, queries):
        reply = queries.search_design_standards("AB292C")
        assert not reply.is_error
        assert reply.text == (
            'Found 2 results for "AB292C":\n\n'
            "Path: brands.pmc.css.colors.primary\nValue: #AB292C"
            "\n\n---\n\n"
            "Path: brands.pmc.sassVariables.$pmc-primary\nValue: #AB292C"
        )

    def test_zero_results_is_not_an_error(self, queries):
        reply = queries.search_design_standards("nonexistent-xyz")
        assert not reply.is_error
        assert reply.text == 'No results found for "nonexistent-xyz"'

    def test_truncation_note(self, queries):
        reply = queries.search_design_standards("AB292C", max_results=1)
        assert reply.text.startswith('Found 2 results for "AB292C" (showing first 1):')
        assert "sassVariables" not in reply.text

    def test_single_result_wording(self, queries):
        assert queries.search_design_standards("1D3C6E").text.startswith('Found 1 result for "1D3C6E":')

    def test_subtree_values_rendered_as_json(self, queries):
        text = queries.search_design_standards("spacing").text
        assert text.startswith('Found 4 results for "spacing":\n\nPath: cssRules.spacing\nValue: {\n  "scale"')


class TestGetUsageGuidelines:
    def test_all(self, queries, tokens):
        assert json.loads(queries.get_usage_guidelines().text) == tokens["usage"]

    def test_one_category(self, queries):
        reply = queries.get_usage_guidelines("accessibility")
        assert json.loads(reply.text) == {"accessibility": {"contrast": "4.5:1 for body text."}}

    def test_missing_category(self, queries):
        reply = queries.get_usage_guidelines("typography")
        assert reply.is_error
        assert "typography" in reply.text


class TestProgress:
    def test_search_reports_total_and_kept(self, document):
        messages = []
        DesignQueries(document, progress=messages.append).search_design_standards("AB292C", max_results=1)
        assert messages == ["2 matches, reporting 1"]

    def test_generate_css_reports_skipped_components(self, document):
        messages = []
        queries = DesignQueries(document, progress=messages.append)
        reply = queries.generate_css("pmc", ["typography", "buttons"])
        assert messages[0] == "Skipped components without rules: typography"
        assert messages[1] == f"Rendered stylesheet for pmc ({len(reply.text)} characters)"
