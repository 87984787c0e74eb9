"""Tests for strict parsing, validation and source-text heuristics."""

import pytest

from norytools.config import DuplicateKeyScope
from norytools.exceptions import JsonParseError
from norytools.jsontools import (
    detect_indentation,
    has_duplicate_keys,
    has_trailing_commas,
    parse,
    validate,
)


class TestParse:
    def test_parses_document(self, sample_json, sample_document):
        assert parse(sample_json) == sample_document

    def test_scalar_roots(self):
        assert parse("42") == 42
        assert parse('"x"') == "x"
        assert parse("null") is None

    def test_invalid_raises_with_parser_message(self):
        with pytest.raises(JsonParseError) as exc_info:
            parse("{")
        assert exc_info.value.message.startswith("Expecting property name")

    @pytest.mark.parametrize("text", ["NaN", "[Infinity]", '{"a": -Infinity}'])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(JsonParseError):
            parse(text)

    def test_out_of_range_number_becomes_null(self):
        """Literals past float range have no finite value and read as null."""
        assert parse("1e400") is None
        assert parse("[1, -1e400]") == [1, None]

    def test_excessive_nesting_raises_parse_error(self):
        text = "[" * 100_000 + "]" * 100_000
        with pytest.raises(JsonParseError, match="Maximum nesting depth exceeded"):
            parse(text)


class TestValidate:
    def test_valid(self):
        result = validate('{"a": [1, 2]}')
        assert result.is_valid is True
        assert result.error is None

    def test_invalid(self):
        result = validate("not json")
        assert result.is_valid is False
        assert result.error == "Expecting value: line 1 column 1 (char 0)"

    def test_empty_string_invalid(self):
        assert validate("").is_valid is False

    def test_trailing_comma_is_invalid(self):
        result = validate('{"a": 1,}')
        assert result.is_valid is False
        assert result.error


class TestDetectIndentation:
    def test_four_spaces(self):
        assert detect_indentation('{\n    "a": 1\n}') == 4

    def test_tab(self):
        assert detect_indentation('{\n\t"a": 1\n}') == 1

    def test_single_line(self):
        assert detect_indentation('{"a": 1}') == 0

    def test_first_line_ignored(self):
        assert detect_indentation('   {"a": 1}') == 0

    def test_first_indented_line_wins(self):
        assert detect_indentation('{\n"a": {\n      "b": 1\n}\n}') == 6


class TestTrailingCommas:
    def test_detects_object_and_array(self):
        assert has_trailing_commas('{"a": 1,}')
        assert has_trailing_commas("[1, 2,\n  ]")

    def test_clean_text(self):
        assert not has_trailing_commas('{"a": [1, 2]}')

    def test_heuristic_is_independent_of_validity(self):
        """Matches inside string literals too, so valid JSON can report True."""
        text = '{"note": "a,}"}'
        assert validate(text).is_valid
        assert has_trailing_commas(text)


class TestDuplicateKeys:
    def test_same_object(self):
        assert has_duplicate_keys('{"a": 1, "a": 2}')

    def test_no_duplicates(self):
        assert not has_duplicate_keys('{"a": 1, "b": {"c": 2}}')

    def test_document_scope_counts_nested_objects(self):
        assert has_duplicate_keys('{"a": {"a": 1}}')
        assert has_duplicate_keys('[{"id": 1}, {"id": 2}]')

    def test_object_scope_only_counts_one_literal(self):
        scope = DuplicateKeyScope.OBJECT
        assert not has_duplicate_keys('{"a": {"a": 1}}', scope)
        assert not has_duplicate_keys('[{"id": 1}, {"id": 2}]', scope)
        assert has_duplicate_keys('{"x": {"a": 1, "a": 2}}', scope)

    def test_invalid_json_raises(self):
        with pytest.raises(JsonParseError):
            has_duplicate_keys("{")

    def test_document_scope_counts_array_indices(self):
        assert has_duplicate_keys('{"a": [1], "b": [2]}')
        assert has_duplicate_keys('{"0": 1, "x": [2]}')
        assert not has_duplicate_keys('{"a": [1, 2], "b": 3}')

    def test_object_scope_ignores_array_indices(self):
        scope = DuplicateKeyScope.OBJECT
        assert not has_duplicate_keys('{"a": [1], "b": [2]}', scope)
