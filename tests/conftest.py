"""Shared pytest fixtures for norytools tests."""

import json

import pytest


@pytest.fixture
def sample_document():
    """Small document with every scalar kind and one level of arrays."""
    return {
        "users": [
            {"name": "Ada", "age": 36, "email": "ada@example.com"},
            {"name": "Bob", "age": 25, "email": "bob@test.org"},
        ],
        "meta": {"count": 2, "active": True},
    }


@pytest.fixture
def sample_json(sample_document):
    """sample_document as compact JSON text."""
    return json.dumps(sample_document)


@pytest.fixture
def nested_json():
    """Three objects deep, one scalar at the bottom."""
    return '{"a": {"b": {"c": 1}}}'


@pytest.fixture
def write_json(tmp_path):
    """Write text into a file under tmp_path and return its path."""

    def _write(text: str, name: str = "data.json"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
