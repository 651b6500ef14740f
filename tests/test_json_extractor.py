"""Tests for JSON extraction from LLM content."""
import pytest

from triage_ai.utils.json_extractor import JSONExtractionError, extract_json


class TestExtractJson:
    """Tests for extract_json strategies."""

    def test_clean_json(self):
        assert extract_json('{"TicketType": "Idea"}') == {"TicketType": "Idea"}

    def test_markdown_fence(self):
        content = '```json\n{"TicketType": "Idea"}\n```'
        assert extract_json(content) == {"TicketType": "Idea"}

    def test_bare_fence(self):
        content = '```\n{"TicketType": "Idea"}\n```'
        assert extract_json(content) == {"TicketType": "Idea"}

    def test_surrounding_text(self):
        content = 'Sure! Here is the classification: {"TicketType": "Returns"} Hope that helps.'
        assert extract_json(content) == {"TicketType": "Returns"}

    def test_braces_inside_strings(self):
        content = 'Result: {"note": "use {curly} \\"braces\\"", "TicketType": "Question"} end'
        assert extract_json(content) == {"note": 'use {curly} "braces"', "TicketType": "Question"}

    def test_bom_prefix(self):
        assert extract_json('\ufeff{"TicketType": "Idea"}') == {"TicketType": "Idea"}

    @pytest.mark.parametrize("content", ["", "   \n", None])
    def test_empty_content(self, content):
        with pytest.raises(JSONExtractionError) as exc_info:
            extract_json(content)
        assert exc_info.value.attempts == ["Content was empty or whitespace only"]

    def test_array_is_rejected(self):
        with pytest.raises(JSONExtractionError):
            extract_json('["Idea"]')

    def test_unbalanced_object(self):
        with pytest.raises(JSONExtractionError) as exc_info:
            extract_json('{"TicketType": "Idea"')
        assert exc_info.value.raw_content == '{"TicketType": "Idea"'
        assert exc_info.value.attempts

    def test_trailing_comma_is_not_repaired(self):
        with pytest.raises(JSONExtractionError):
            extract_json('{"TicketType": "Idea",}')
