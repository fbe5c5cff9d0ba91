"""
Tests for the stateless input validation rules.
"""

import pytest

from study_groups.services.base import ValidationError
from study_groups.services.validation import (
    validate_description,
    validate_group_name,
    validate_message_content,
    validate_page_window,
)


class TestGroupName:
    """Test group name validation."""

    def test_trims_surrounding_whitespace(self):
        assert validate_group_name("   Calculus  ") == "Calculus"

    @pytest.mark.parametrize("name", ["", "   ", "ab", "  ab  ", "a" * 51])
    def test_rejects_invalid_names(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validate_group_name(name)

        assert exc_info.value.field == "name"
        assert exc_info.value.error_code == "VALIDATION_ERROR"

    def test_length_bounds_are_inclusive(self):
        assert validate_group_name("abc") == "abc"
        assert validate_group_name("a" * 50) == "a" * 50

    def test_custom_bounds(self):
        assert validate_group_name("ab", min_length=2, max_length=4) == "ab"
        with pytest.raises(ValidationError):
            validate_group_name("abcde", min_length=2, max_length=4)


class TestDescription:
    """Test description validation."""

    def test_trims_and_has_no_ceiling(self):
        long_text = "x" * 5000
        assert validate_description(f"  {long_text}\n") == long_text

    @pytest.mark.parametrize("description", ["", " \t\n "])
    def test_rejects_blank(self, description):
        with pytest.raises(ValidationError) as exc_info:
            validate_description(description)

        assert exc_info.value.field == "description"


class TestMessageContent:
    """Test message content validation."""

    def test_trims_content(self):
        assert validate_message_content("  hello  ") == "hello"

    def test_rejects_blank(self):
        with pytest.raises(ValidationError):
            validate_message_content("    ")

    def test_limit_applies_after_trimming(self):
        assert validate_message_content(" " + "a" * 1000 + " ") == "a" * 1000

    def test_rejects_oversized_content(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_message_content("a" * 1001)

        assert exc_info.value.value == 1001
        assert "1000" in exc_info.value.message


class TestPageWindow:
    """Test pagination window validation."""

    def test_accepts_zero_values(self):
        assert validate_page_window(0, 0) == (0, 0)

    @pytest.mark.parametrize("skip, limit", [(-1, 10), (0, -5)])
    def test_rejects_negative_values(self, skip, limit):
        with pytest.raises(ValidationError):
            validate_page_window(skip, limit)
