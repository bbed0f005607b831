"""
Error taxonomy for Linkerd version checks
"""

from requests import RequestException

# Transport failures (connection errors, timeouts, HTTP errors raised by the
# public API client) are the transport's own exceptions, re-raised unmodified.
TransportError = RequestException


class VersionCheckError(Exception):
    """Base class for all version check failures"""


class MalformedVersionError(VersionCheckError, ValueError):
    """Raised when a version string has no channel/revision separator"""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"unsupported version format: {raw}")


class MismatchDiagnosisError(VersionCheckError):
    """
    Raised when two differing versions cannot be classified because one side
    does not parse. This is not a version mismatch.
    """

    def __init__(self, side: str, raw: str):
        self.side = side
        self.raw = raw
        super().__init__(f"failed to parse {side} version: unsupported version format: {raw}")


class VersionMismatchError(VersionCheckError):
    """Base class for two versions that differ"""

    def __init__(self, actual: str, expected: str, message: str):
        self.actual = actual
        self.expected = expected
        super().__init__(message)


class ChannelMismatchError(VersionMismatchError):
    """The two builds are on different release channels"""

    def __init__(self, actual: str, expected: str):
        super().__init__(
            actual,
            expected,
            f"mismatched channels: running {actual} but retrieved {expected}"
        )


class RevisionMismatchError(VersionMismatchError):
    """The two builds share a channel but differ in revision"""

    def __init__(self, channel: str, actual_revision: str, expected_revision: str):
        self.channel = channel
        self.actual_revision = actual_revision
        self.expected_revision = expected_revision
        super().__init__(
            f"{channel}-{actual_revision}",
            f"{channel}-{expected_revision}",
            f"is running version {actual_revision} but the latest {channel} "
            f"version is {expected_revision}"
        )


class UnexpectedResponseError(VersionCheckError):
    """The version feed answered with a non-200 status"""

    def __init__(self, status: int, reason: str = ""):
        self.status = status
        self.reason = reason
        status_text = f"{status} {reason}".strip()
        super().__init__(f"Unexpected versioncheck response: {status_text}")


class FeedDecodeError(VersionCheckError, ValueError):
    """The version feed body is not a flat JSON object of strings"""


class UnsupportedChannelError(VersionCheckError):
    """The running channel is absent from the version feed"""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(f"unsupported version channel: {channel}")


class InvalidVersionResponseError(VersionCheckError, ValueError):
    """The control plane answered with a payload that is not a version response"""
