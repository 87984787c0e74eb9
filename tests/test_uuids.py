"""Tests for UUID generation and validation."""

import pytest

from norytools.uuids import UUID_PATTERN, generate, generate_many, validate_uuid

VALID_V4 = "550e8400-e29b-41d4-a716-446655440000"


class TestGenerate:
    def test_default_format(self):
        value = generate()
        assert UUID_PATTERN.fullmatch(value)
        assert value == value.lower()
        assert value[14] == "4"

    def test_uppercase(self):
        value = generate(uppercase=True)
        assert value == value.upper()

    def test_no_dashes(self):
        value = generate(no_dashes=True)
        assert len(value) == 32
        assert "-" not in value

    def test_prefix(self):
        assert generate(prefix="id:").startswith("id:")

    def test_generated_values_validate(self):
        for value in generate_many(20, uppercase=True, no_dashes=True, prefix="urn:"):
            assert validate_uuid(value).is_valid

    def test_generate_many_unique(self):
        values = generate_many(50)
        assert len(values) == 50
        assert len(set(values)) == 50


class TestValidateUuid:
    def test_valid(self):
        result = validate_uuid(VALID_V4)
        assert result.is_valid is True
        assert result.version == 4
        assert result.error is None

    @pytest.mark.parametrize(
        "value",
        [VALID_V4.upper(), VALID_V4.replace("-", ""), f"id:{VALID_V4}", f"urn:{VALID_V4}"],
    )
    def test_accepted_forms(self, value):
        assert validate_uuid(value).is_valid

    @pytest.mark.parametrize("value", ["", "not-a-uuid", VALID_V4[:-1], VALID_V4 + "0"])
    def test_bad_format(self, value):
        result = validate_uuid(value)
        assert result.is_valid is False
        assert result.error == "Invalid UUID format"

    def test_wrong_version(self):
        result = validate_uuid("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
        assert result.is_valid is False
        assert result.version == 1
        assert result.error == "Not a version 4 UUID"

    def test_wrong_variant(self):
        result = validate_uuid("550e8400-e29b-41d4-7716-446655440000")
        assert result.is_valid is False
        assert result.error == "Invalid UUID variant"
