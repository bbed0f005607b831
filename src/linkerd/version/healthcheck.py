"""
Version health checks - is the CLI and control plane up to date
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from linkerd.version.check import VersionFetcher, check_client_version, check_server_version
from linkerd.version.codec import VersionIdentifier, format_version
from linkerd.version.config import VersionCheckConfig
from linkerd.version.errors import TransportError, VersionCheckError
from linkerd.version.latest import get_latest_version
from linkerd.version.running import RunningVersion

logger = logging.getLogger(__name__)

LATEST_VERSION_CHECK = "can determine the latest version"
CLIENT_VERSION_CHECK = "cli is up-to-date"
SERVER_VERSION_CHECK = "control plane is up-to-date"


@dataclass
class CheckResult:
    """Outcome of a single health check"""

    description: str
    error: Optional[Exception] = None
    skipped: bool = False

    @property
    def success(self) -> bool:
        return self.error is None and not self.skipped


class VersionHealthChecker:
    """
    Runs the version health checks in order:

    1. Determine the expected version (latest for the running channel,
       unless one is supplied)
    2. Compare the CLI's running version against it
    3. Compare the control plane's version against it

    Failures are collected as CheckResults rather than raised, so every
    check is reported.
    """

    def __init__(self,
                 running: RunningVersion,
                 config: VersionCheckConfig,
                 api: Optional[VersionFetcher] = None,
                 source: str = "cli"):
        """
        Initialize the health checker.

        Args:
            running: Version of this process
            config: Version check configuration
            api: Optional control plane capability; the control plane
                 check is not run without one
            source: Telemetry source tag sent to the versioncheck feed
        """
        self.running = running
        self.config = config
        self.api = api
        self.source = source

    def determine_expected_version(self) -> str:
        """Build the latest full version string for the running channel"""
        revision = get_latest_version(
            self.running,
            self.config.installation_id,
            self.source,
            url=self.config.versioncheck_url,
            timeout=self.config.timeout_seconds,
            verify_tls=self.config.verify_tls
        )
        channel = self.running.identifier.channel
        return format_version(VersionIdentifier(channel=channel, revision=revision))

    def run(self, expected_version: Optional[str] = None) -> List[CheckResult]:
        """
        Run all version checks.

        Args:
            expected_version: Version to compare against. Looked up from
                              the versioncheck feed when not provided.

        Returns:
            List of CheckResult in execution order
        """
        results: List[CheckResult] = []

        if expected_version is None:
            try:
                expected_version = self.determine_expected_version()
                results.append(CheckResult(LATEST_VERSION_CHECK))
            except (VersionCheckError, TransportError) as e:
                logger.debug(f"Latest version lookup failed: {e}")
                results.append(CheckResult(LATEST_VERSION_CHECK, error=e))

        descriptions = [CLIENT_VERSION_CHECK]
        if self.api is not None:
            descriptions.append(SERVER_VERSION_CHECK)

        if expected_version is None:
            results.extend(CheckResult(d, skipped=True) for d in descriptions)
            return results

        results.append(self._run_check(
            CLIENT_VERSION_CHECK,
            lambda: check_client_version(self.running, expected_version)
        ))

        if self.api is not None:
            results.append(self._run_check(
                SERVER_VERSION_CHECK,
                lambda: check_server_version(
                    self.api, expected_version, timeout=self.config.timeout_seconds
                )
            ))

        return results

    def _run_check(self, description: str, check) -> CheckResult:
        try:
            check()
        except (VersionCheckError, TransportError) as e:
            logger.debug(f"Check '{description}' failed: {e}")
            return CheckResult(description, error=e)
        return CheckResult(description)
