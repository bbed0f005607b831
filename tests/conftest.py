"""Pytest configuration and fixtures."""
import pytest
import tempfile
from pathlib import Path

from linkerd.version.config import VersionCheckConfig
from linkerd.version.running import RunningVersion
from tests.helpers import serve_slow_peer, stop_slow_peer


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def running_edge():
    """Running version on the edge channel."""
    return RunningVersion("edge-20.1.1")


@pytest.fixture
def config(temp_dir):
    """Version check configuration in a temporary directory."""
    return VersionCheckConfig(config_dir=temp_dir / 'linkerd')


@pytest.fixture(params=["drip", "stall"])
def slow_peer(request):
    """Local HTTP peer that trickles or stalls its response body."""
    server, url = serve_slow_peer(request.param)
    yield url
    stop_slow_peer(server)
