"""
Wire codec for Linkerd version identifiers ("<channel>-<revision>")
"""

from dataclasses import dataclass

from linkerd.version.errors import MalformedVersionError

SEPARATOR = "-"


@dataclass(frozen=True)
class VersionIdentifier:
    """A release channel and a build revision within that channel"""

    channel: str
    revision: str

    def __str__(self) -> str:
        return format_version(self)


def parse_version(raw: str) -> VersionIdentifier:
    """
    Parse a version string into its channel and revision.

    Only the first separator splits, so revisions may themselves contain
    dashes while channels never do.

    Args:
        raw: Version string such as "edge-20.1.1"

    Returns:
        VersionIdentifier for the string

    Raises:
        MalformedVersionError: If the string has no separator

    Examples:
        >>> parse_version("edge-2024-01-01")
        VersionIdentifier(channel='edge', revision='2024-01-01')
    """
    parts = raw.split(SEPARATOR, 1)
    if len(parts) != 2:
        raise MalformedVersionError(raw)

    return VersionIdentifier(channel=parts[0], revision=parts[1])


def format_version(version: VersionIdentifier) -> str:
    """Format a VersionIdentifier back to its wire form"""
    return f"{version.channel}{SEPARATOR}{version.revision}"
