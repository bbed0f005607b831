"""
Linkerd version checks - running version, compatibility and latest release
"""

from .codec import VersionIdentifier, format_version, parse_version
from .running import RunningVersion, UNDEFINED_VERSION, VERSION_OVERRIDE_ENV
from .diagnose import diagnose_mismatch
from .check import VersionFetcher, check_client_version, check_server_version, get_server_version
from .latest import get_latest_version
from .errors import (
    ChannelMismatchError,
    FeedDecodeError,
    InvalidVersionResponseError,
    MalformedVersionError,
    MismatchDiagnosisError,
    RevisionMismatchError,
    TransportError,
    UnexpectedResponseError,
    UnsupportedChannelError,
    VersionCheckError,
    VersionMismatchError,
)

__all__ = [
    "VersionIdentifier",
    "format_version",
    "parse_version",
    "RunningVersion",
    "UNDEFINED_VERSION",
    "VERSION_OVERRIDE_ENV",
    "diagnose_mismatch",
    "VersionFetcher",
    "check_client_version",
    "check_server_version",
    "get_server_version",
    "get_latest_version",
    "ChannelMismatchError",
    "FeedDecodeError",
    "InvalidVersionResponseError",
    "MalformedVersionError",
    "MismatchDiagnosisError",
    "RevisionMismatchError",
    "TransportError",
    "UnexpectedResponseError",
    "UnsupportedChannelError",
    "VersionCheckError",
    "VersionMismatchError",
]
