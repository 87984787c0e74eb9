"""Tests for the exception hierarchy and node classification."""

import pytest

from norytools.exceptions import (
    AnalysisError,
    CodecError,
    ConfigurationError,
    FileLoadError,
    FilterError,
    InvalidPathError,
    JsonParseError,
    NoryToolsError,
)
from norytools.nodes import JsonKind, is_container, kind_of, scalar_text, search_text


class TestNoryToolsError:
    def test_message_only(self):
        error = NoryToolsError("Something broke")
        assert str(error) == "Something broke"
        assert error.details == {}

    def test_details_in_str(self):
        error = FileLoadError("File too large", details={"size": 20, "max_size": 10})
        assert str(error) == "File too large (size=20, max_size=10)"
        assert error.message == "File too large"

    @pytest.mark.parametrize(
        "exc_class",
        [
            JsonParseError,
            InvalidPathError,
            FilterError,
            AnalysisError,
            ConfigurationError,
            FileLoadError,
            CodecError,
        ],
    )
    def test_all_inherit_from_base(self, exc_class):
        assert issubclass(exc_class, NoryToolsError)

    def test_parse_error_is_value_error(self):
        """JsonParseError can be caught as a ValueError like json.JSONDecodeError."""
        with pytest.raises(ValueError):
            raise JsonParseError("Expecting value")

    def test_default_messages(self):
        assert str(InvalidPathError()) == "Invalid path"
        assert str(FilterError()) == "Invalid JSON or filter options"
        assert str(AnalysisError()) == "Invalid JSON format"


class TestKindOf:
    """Tests for JsonKind dispatch."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ({}, JsonKind.OBJECT),
            ([], JsonKind.ARRAY),
            ("", JsonKind.STRING),
            (0, JsonKind.NUMBER),
            (1.5, JsonKind.NUMBER),
            (True, JsonKind.BOOLEAN),
            (False, JsonKind.BOOLEAN),
            (None, JsonKind.NULL),
            (object(), JsonKind.UNDEFINED),
            ((1, 2), JsonKind.UNDEFINED),
        ],
    )
    def test_kinds(self, value, expected):
        assert kind_of(value) is expected

    def test_bool_is_not_number(self):
        """bool is an int subclass but must classify as boolean."""
        assert kind_of(True) is not JsonKind.NUMBER

    def test_is_container(self):
        assert is_container({}) and is_container([])
        assert not is_container("x")


class TestScalarText:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("plain", "plain"),
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (2.5, "2.5"),
        ],
    )
    def test_json_literal_text(self, value, expected):
        assert scalar_text(value) == expected


class TestSearchText:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("red", "red"),
            (1.5, "1.5"),
            (["red", "blue"], "red,blue"),
            ([None, True, 2], ",true,2"),
            ([["a", "b"], "c"], "a,b,c"),
            ([], ""),
            ({"a": "red"}, ""),
        ],
    )
    def test_search_text(self, value, expected):
        assert search_text(value) == expected
