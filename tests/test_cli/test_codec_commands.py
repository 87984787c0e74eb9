"""Integration tests for the `norytools base64` and `norytools uuid` commands."""

import pytest
from click.testing import CliRunner

from norytools.cli.main import main
from norytools.uuids import validate_uuid


@pytest.fixture
def runner():
    return CliRunner()


class TestBase64Commands:
    def test_encode_argument(self, runner):
        result = runner.invoke(main, ["base64", "encode", "hello world"])
        assert result.exit_code == 0
        assert result.output == "aGVsbG8gd29ybGQ=\n"

    def test_encode_stdin(self, runner):
        result = runner.invoke(main, ["base64", "encode"], input="hi")
        assert result.output == "aGk=\n"

    def test_encode_url_safe_no_padding(self, runner):
        result = runner.invoke(main, ["base64", "encode", "?>>a", "--url-safe", "--no-padding"])
        assert result.output == "Pz4-YQ\n"

    def test_encode_wrap(self, runner):
        result = runner.invoke(main, ["base64", "encode", "hello world", "--wrap", "4"])
        assert result.output == "aGVs\nbG8g\nd29y\nbGQ=\n"

    def test_encode_file(self, runner, tmp_path):
        source = tmp_path / "data.bin"
        source.write_bytes(b"\x00\x01\x02")
        result = runner.invoke(main, ["base64", "encode", "--file", str(source)])
        assert result.output == "AAEC\n"

    def test_decode(self, runner):
        result = runner.invoke(main, ["base64", "decode", "aGVsbG8gd29ybGQ="])
        assert result.exit_code == 0
        assert result.output == "hello world\n"

    def test_decode_url_safe(self, runner):
        result = runner.invoke(main, ["base64", "decode", "Pz4-", "--url-safe"])
        assert result.output == "?>>\n"

    def test_decode_to_file(self, runner, tmp_path):
        target = tmp_path / "out.bin"
        result = runner.invoke(main, ["base64", "decode", "/w==", "-o", str(target)])
        assert result.exit_code == 0
        assert target.read_bytes() == b"\xff"

    def test_decode_invalid(self, runner):
        result = runner.invoke(main, ["base64", "decode", "!!!"])
        assert result.exit_code == 1
        assert "Invalid Base64 input" in result.output

    def test_validate(self, runner):
        result = runner.invoke(main, ["base64", "validate", "aGVsbG8="])
        assert result.exit_code == 0
        assert "Valid Base64" in result.output

    def test_validate_invalid(self, runner):
        result = runner.invoke(main, ["base64", "validate", "%%%"])
        assert result.exit_code == 1


class TestUuidCommands:
    def test_generate_one(self, runner):
        result = runner.invoke(main, ["uuid", "generate"])
        assert result.exit_code == 0
        assert validate_uuid(result.output.strip()).is_valid

    def test_generate_many_formatted(self, runner):
        result = runner.invoke(
            main, ["uuid", "generate", "-n", "3", "--uppercase", "--no-dashes", "--prefix", "id:"]
        )
        lines = result.output.splitlines()
        assert len(lines) == 3
        for line in lines:
            assert line.startswith("id:")
            assert len(line) == 35
            assert line[3:] == line[3:].upper()

    def test_generate_count_bounds(self, runner):
        assert runner.invoke(main, ["uuid", "generate", "-n", "0"]).exit_code == 2

    def test_validate_valid(self, runner):
        result = runner.invoke(main, ["uuid", "validate", "550e8400-e29b-41d4-a716-446655440000"])
        assert result.exit_code == 0
        assert "version 4" in result.output

    def test_validate_wrong_version(self, runner):
        result = runner.invoke(main, ["uuid", "validate", "6ba7b810-9dad-11d1-80b4-00c04fd430c8"])
        assert result.exit_code == 1
        assert "Not a version 4 UUID" in result.output
