"""
Resolution of the version the current process is running
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from linkerd._build import BUILD_VERSION
from linkerd.version.codec import VersionIdentifier, parse_version

logger = logging.getLogger(__name__)

UNDEFINED_VERSION = "undefined"
VERSION_OVERRIDE_ENV = "LINKERD_CONTAINER_VERSION_OVERRIDE"


@dataclass(frozen=True)
class RunningVersion:
    """
    The version of this process, resolved once at process entry and passed
    to every component that compares against it.

    The value is kept raw: it may be the sentinel "undefined" and is only
    parsed when a channel or revision is actually needed.
    """

    value: str

    @classmethod
    def resolve(cls,
                build_version: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None) -> "RunningVersion":
        """
        Resolve the running version.

        The build-time version wins. Only when it was left at the "undefined"
        sentinel is $LINKERD_CONTAINER_VERSION_OVERRIDE consulted, so that
        container builds can bind the version without relinking.

        Args:
            build_version: Build-time version (default: linkerd._build.BUILD_VERSION)
            environ: Environment mapping (default: os.environ)

        Returns:
            Frozen RunningVersion
        """
        if build_version is None:
            build_version = BUILD_VERSION
        if environ is None:
            environ = os.environ

        version = build_version
        if build_version == UNDEFINED_VERSION:
            override = environ.get(VERSION_OVERRIDE_ENV, "")
            if override:
                logger.debug(f"Using {VERSION_OVERRIDE_ENV}={override}")
                version = override

        return cls(value=version)

    @property
    def identifier(self) -> VersionIdentifier:
        """Parsed channel and revision; raises MalformedVersionError for the sentinel"""
        return parse_version(self.value)

    def __str__(self) -> str:
        return self.value
