"""
Classification of two differing version strings
"""

from linkerd.version.codec import parse_version
from linkerd.version.errors import (
    ChannelMismatchError,
    MalformedVersionError,
    MismatchDiagnosisError,
    RevisionMismatchError,
    VersionMismatchError,
)


def diagnose_mismatch(actual: str, expected: str) -> VersionMismatchError:
    """
    Build the mismatch error describing how two versions differ.

    Args:
        actual: Version that is running
        expected: Version it was compared against

    Returns:
        ChannelMismatchError if the channels differ,
        RevisionMismatchError if only the revisions differ

    Raises:
        MismatchDiagnosisError: If either side is not a valid version string
    """
    try:
        actual_version = parse_version(actual)
    except MalformedVersionError as e:
        raise MismatchDiagnosisError("actual", actual) from e

    try:
        expected_version = parse_version(expected)
    except MalformedVersionError as e:
        raise MismatchDiagnosisError("expected", expected) from e

    if actual_version.channel != expected_version.channel:
        return ChannelMismatchError(actual, expected)

    return RevisionMismatchError(
        actual_version.channel,
        actual_version.revision,
        expected_version.revision
    )
