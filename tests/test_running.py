"""Tests for running version resolution."""
import pytest

from linkerd.version.errors import MalformedVersionError
from linkerd.version.running import (
    RunningVersion,
    UNDEFINED_VERSION,
    VERSION_OVERRIDE_ENV,
)


def test_build_version_wins_over_override():
    running = RunningVersion.resolve(
        build_version="stable-2.9.0",
        environ={VERSION_OVERRIDE_ENV: "edge-21.1.1"}
    )
    assert running.value == "stable-2.9.0"


def test_override_used_when_build_undefined():
    running = RunningVersion.resolve(
        build_version=UNDEFINED_VERSION,
        environ={VERSION_OVERRIDE_ENV: "edge-21.1.1"}
    )
    assert running.value == "edge-21.1.1"


def test_empty_override_ignored():
    running = RunningVersion.resolve(
        build_version=UNDEFINED_VERSION,
        environ={VERSION_OVERRIDE_ENV: ""}
    )
    assert running.value == UNDEFINED_VERSION


def test_missing_override_keeps_sentinel():
    running = RunningVersion.resolve(build_version=UNDEFINED_VERSION, environ={})
    assert running.value == UNDEFINED_VERSION


def test_defaults_read_process_environment(monkeypatch):
    monkeypatch.setenv(VERSION_OVERRIDE_ENV, "edge-22.2.2")
    running = RunningVersion.resolve(build_version=UNDEFINED_VERSION)
    assert running.value == "edge-22.2.2"


def test_identifier_parses_value():
    running = RunningVersion("edge-2024-01-01")
    assert running.identifier.channel == "edge"
    assert running.identifier.revision == "2024-01-01"
    assert str(running) == "edge-2024-01-01"


def test_identifier_of_sentinel_is_malformed():
    with pytest.raises(MalformedVersionError):
        RunningVersion(UNDEFINED_VERSION).identifier


def test_running_version_is_frozen():
    running = RunningVersion("edge-20.1.1")
    with pytest.raises(AttributeError):
        running.value = "edge-20.1.2"
