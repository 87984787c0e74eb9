"""Tests for path joining, splitting and resolution."""

import pytest

from norytools.exceptions import InvalidPathError
from norytools.jsontools import join_index, join_key, resolve_path, split_path


class TestJoin:
    def test_join_key(self):
        assert join_key("", "a") == "a"
        assert join_key("a", "b") == "a.b"

    def test_join_index(self):
        assert join_index("users", 0) == "users[0]"
        assert join_index("", 3) == "[3]"


class TestSplitPath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("", []),
            ("a", ["a"]),
            ("a.b.c", ["a", "b", "c"]),
            ("a.0.b", ["a", "0", "b"]),
            ("a[0].b", ["a", "0", "b"]),
            ("a[0][1]", ["a", "0", "1"]),
            ("[2].name", ["2", "name"]),
        ],
    )
    def test_segments(self, path, expected):
        assert split_path(path) == expected


class TestResolvePath:
    @pytest.fixture
    def doc(self):
        return {"a": [{"b": 1}, {"b": [10, 20]}], "c": None}

    def test_empty_path_is_root(self, doc):
        assert resolve_path(doc, "") is doc

    def test_dotted_and_bracketed(self, doc):
        assert resolve_path(doc, "a.0.b") == 1
        assert resolve_path(doc, "a[1].b[1]") == 20

    def test_null_value_resolves(self, doc):
        assert resolve_path(doc, "c") is None

    @pytest.mark.parametrize("path", ["missing", "a.5", "a.-1", "a.x", "a.0.b.c", "c.d"])
    def test_unresolvable_raises(self, doc, path):
        with pytest.raises(InvalidPathError) as exc_info:
            resolve_path(doc, path)
        assert str(exc_info.value) == "Invalid path"
