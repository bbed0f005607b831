"""
Client and control-plane version validation
"""

import logging
from typing import TYPE_CHECKING, Protocol

from linkerd.version.diagnose import diagnose_mismatch
from linkerd.version.running import RunningVersion

if TYPE_CHECKING:
    from linkerd.api.models import VersionInfo

logger = logging.getLogger(__name__)

SERVER_VERSION_TIMEOUT = 5.0


class VersionFetcher(Protocol):
    """Capability to retrieve a control plane's version in one call"""

    def version(self, timeout: float) -> "VersionInfo":
        ...


def check_client_version(running: RunningVersion, expected: str) -> None:
    """
    Validate that the client is running the expected version.

    Args:
        running: Version of this process
        expected: Version the client should be running

    Raises:
        VersionMismatchError: If the versions differ
        MismatchDiagnosisError: If they differ and one does not parse
    """
    if running.value != expected:
        logger.debug(f"Client version {running.value} does not match {expected}")
        raise diagnose_mismatch(running.value, expected)


def get_server_version(api: VersionFetcher, timeout: float = SERVER_VERSION_TIMEOUT) -> str:
    """
    Fetch the release version reported by the control plane.

    Issues a single version call; transport failures, timeouts included,
    propagate unmodified.

    Args:
        api: Public API capability, bounding the whole call by timeout
        timeout: Call deadline in seconds

    Returns:
        The control plane's release version string

    Raises:
        TransportError: If the call fails or passes its deadline
        InvalidVersionResponseError: If the control plane's payload is invalid
    """
    info = api.version(timeout=timeout)
    return info.release_version


def check_server_version(api: VersionFetcher,
                         expected: str,
                         timeout: float = SERVER_VERSION_TIMEOUT) -> None:
    """
    Validate that the control plane is running the expected version.

    Raises:
        TransportError: If the version could not be fetched
        VersionMismatchError: If the versions differ
        MismatchDiagnosisError: If they differ and one does not parse
    """
    release_version = get_server_version(api, timeout=timeout)

    if release_version != expected:
        logger.debug(f"Control plane version {release_version} does not match {expected}")
        raise diagnose_mismatch(release_version, expected)
