"""Tests for identifier sanitization."""

import pytest

from javagen.codegen.core.naming import NamingCase, create_java_sanitizer


@pytest.fixture
def sanitizer():
    return create_java_sanitizer()


class TestSanitizeName:
    """Tests for Java identifiers."""

    def test_snake_to_camel(self, sanitizer):
        assert sanitizer.sanitize_name("user_id") == "userId"

    def test_pascal(self, sanitizer):
        assert sanitizer.sanitize_name("user_id", NamingCase.PASCAL_CASE) == "UserId"

    def test_keeps_camel_case(self, sanitizer):
        assert sanitizer.sanitize_name("resultSet") == "resultSet"

    def test_reserved_word(self, sanitizer):
        assert sanitizer.sanitize_name("class") == "class_"

    def test_invalid_characters(self, sanitizer):
        assert sanitizer.sanitize_name("first-name") == "firstName"

    def test_leading_digit(self, sanitizer):
        assert sanitizer.sanitize_name("1st") == "_1st"

    def test_empty(self, sanitizer):
        assert sanitizer.sanitize_name("") == "value"

    def test_duplicates_get_counter(self, sanitizer):
        assert sanitizer.sanitize_name("id") == "id"
        assert sanitizer.sanitize_name("id") == "id1"
        assert sanitizer.sanitize_name("id") == "id2"

    def test_reset(self, sanitizer):
        sanitizer.sanitize_name("id")
        sanitizer.reset_used_names()
        assert sanitizer.sanitize_name("id") == "id"

    def test_preserve_keeps_spelling(self, sanitizer):
        assert sanitizer.sanitize_name("URL", NamingCase.PRESERVE) == "URL"
        assert sanitizer.sanitize_name("user_id", NamingCase.PRESERVE) == "user_id"
        assert sanitizer.sanitize_name("_hidden", NamingCase.PRESERVE) == "_hidden"

    def test_preserve_still_resolves_conflicts(self, sanitizer):
        assert sanitizer.sanitize_name("int", NamingCase.PRESERVE) == "int_"
        assert sanitizer.sanitize_name("max-size", NamingCase.PRESERVE) == "max_size"
        assert sanitizer.sanitize_name("max_size", NamingCase.PRESERVE) == "max_size1"
