"""Tests for difftour.llm.parsing module."""

import pytest

from difftour.llm import JSONParseError, parse_json_response, validate_tour_plan_json
from difftour.tour import SchemaViolationError, TourPlanRef


class TestParseJsonResponse:
    """Tests for parse_json_response."""

    def test_plain_json(self, sample_llm_response):
        """Test parsing a bare JSON object."""
        parsed = parse_json_response(sample_llm_response)

        assert parsed["title"] == "Add bar import and greeting"
        assert len(parsed["sections"]) == 2

    def test_markdown_fence(self, sample_llm_response):
        """Test parsing JSON wrapped in a markdown code fence."""
        parsed = parse_json_response(f"```json\n{sample_llm_response}\n```")

        assert parsed["sections"][0]["hunk_ids"] == [0]

    def test_fence_with_surrounding_text(self, sample_llm_response):
        """Test parsing a fenced block surrounded by commentary."""
        raw = f"Here is the tour:\n```\n{sample_llm_response}\n```\nHope this helps!"

        assert parse_json_response(raw)["title"] == "Add bar import and greeting"

    def test_fence_containing_nested_fence(self):
        """Test that a code fence inside a JSON string does not cut the object short."""
        raw = (
            "```json\n"
            '{"title": "T", "summary": "uses ```\\ncode\\n``` blocks", "sections": []}\n'
            "```"
        )

        assert parse_json_response(raw)["summary"] == "uses ```\ncode\n``` blocks"

    def test_braces_in_prose(self, sample_llm_response):
        """Test extracting the outermost braces from surrounding prose."""
        raw = f"Sure! {sample_llm_response} Let me know."

        assert parse_json_response(raw)["summary"].startswith("Imports bar")

    def test_empty_response(self):
        """Test that an empty response raises JSONParseError."""
        with pytest.raises(JSONParseError, match="No text response"):
            parse_json_response("   \n")

    def test_invalid_json(self):
        """Test that unparseable text raises JSONParseError."""
        with pytest.raises(JSONParseError, match="Failed to parse"):
            parse_json_response("I could not produce a tour { sorry }")

    def test_non_object_json(self):
        """Test that a top-level JSON array is rejected."""
        with pytest.raises(JSONParseError):
            parse_json_response("[1, 2, 3]")


class TestValidateTourPlanJson:
    """Tests for validate_tour_plan_json."""

    def test_valid(self, sample_llm_response):
        """Test validating a well-formed plan."""
        plan = validate_tour_plan_json(parse_json_response(sample_llm_response))

        assert isinstance(plan, TourPlanRef)
        assert plan.sections[1].hunk_ids == [1, 2]
        assert plan.sections[1].language == "typescript"
        assert plan.sections[0].language is None

    def test_schema_violation(self):
        """Test that a plan with the wrong shape raises SchemaViolationError."""
        with pytest.raises(SchemaViolationError, match="does not match"):
            validate_tour_plan_json({"title": "T", "sections": []})
