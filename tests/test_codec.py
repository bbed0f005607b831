"""Tests for the version string codec."""
import doctest

import pytest

import linkerd.version.codec as codec_module
from linkerd.version.codec import VersionIdentifier, format_version, parse_version
from linkerd.version.errors import MalformedVersionError


class TestParseVersion:
    """Test parse_version."""

    def test_parse_simple(self):
        version = parse_version("edge-20.1.1")
        assert version.channel == "edge"
        assert version.revision == "20.1.1"

    def test_parse_splits_on_first_separator_only(self):
        assert parse_version("edge-2024-01-01") == VersionIdentifier("edge", "2024-01-01")

    def test_parse_undefined_is_malformed(self):
        with pytest.raises(MalformedVersionError) as exc_info:
            parse_version("undefined")
        assert exc_info.value.raw == "undefined"
        assert "unsupported version format: undefined" in str(exc_info.value)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            parse_version("")

    @pytest.mark.parametrize("raw", ["stable-2.9.0", "edge-21.1.1", "dev-abc-def-1"])
    def test_format_inverts_parse(self, raw):
        assert format_version(parse_version(raw)) == raw


class TestFormatVersion:
    """Test format_version."""

    @pytest.mark.parametrize("version", [
        VersionIdentifier("stable", "2.9.0"),
        VersionIdentifier("edge", "2024-01-01"),
        VersionIdentifier("git", "deadbeef"),
    ])
    def test_parse_inverts_format(self, version):
        assert parse_version(format_version(version)) == version

    def test_str_is_wire_form(self):
        assert str(VersionIdentifier("stable", "2.9.0")) == "stable-2.9.0"

    def test_identifier_is_immutable(self):
        version = VersionIdentifier("stable", "2.9.0")
        with pytest.raises(AttributeError):
            version.channel = "edge"


def test_docstring_examples_run():
    assert doctest.testmod(codec_module).failed == 0
