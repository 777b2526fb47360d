"""Tests for prompt rendering."""

import pytest

from src.core.prompts import PromptFormatError, format_prompt, load_default_prompt


class TestFormatPrompt:
    """Tests for format_prompt function."""

    def test_substitutes_values(self):
        result = format_prompt("Review {{ subject }} now", {"subject": "Fix bug"})

        assert result == "Review Fix bug now"

    def test_does_not_escape_code(self):
        code = "if a < b && c > d: return '<tag>'"

        assert format_prompt("{{ code_message }}", {"code_message": code}) == code

    def test_undefined_variable_raises(self):
        with pytest.raises(PromptFormatError):
            format_prompt("Hello {{ missing }}", {})

    def test_syntax_error_raises(self):
        with pytest.raises(PromptFormatError):
            format_prompt("Hello {% if %}", {"subject": "x"})


class TestDefaultPrompts:
    """The shipped templates render with the values the reviewer passes."""

    @pytest.mark.parametrize(
        "name, values",
        [
            ("system", {"subject": "Add parser"}),
            ("translation", {"language": "French"}),
            ("review_code", {"code_message": "print('hi')"}),
            ("summarize_diff", {"patch_message": "+print('hi')"}),
        ],
    )
    def test_default_prompt_renders(self, name, values):
        rendered = format_prompt(load_default_prompt(name), values)

        assert list(values.values())[0] in rendered
