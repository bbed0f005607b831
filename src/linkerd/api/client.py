"""
Public API client - version retrieval from a Linkerd control plane
"""

import logging
import time
from typing import Optional

import requests
from pydantic import ValidationError

from linkerd.version.errors import InvalidVersionResponseError
from linkerd.version.transport import read_body
from .models import VersionInfo

logger = logging.getLogger(__name__)

VERSION_PATH = "/api/v1/Version"


class PublicApiClient:
    """
    HTTP client for the control plane's public API.

    Implements the VersionFetcher capability. Errors from requests
    (connection failures, timeouts, non-2xx statuses) are raised unmodified.
    """

    def __init__(self, api_addr: str,
                 verify_tls: bool = True,
                 session: Optional[requests.Session] = None):
        """
        Initialize the public API client.

        Args:
            api_addr: Control plane address (host:port or URL)
            verify_tls: Whether to verify TLS certificates
            session: Optional requests session to reuse
        """
        if not api_addr.startswith('http'):
            api_addr = f"http://{api_addr}"
        self.api_addr = api_addr.rstrip('/')
        self.verify_tls = verify_tls
        self.session = session if session is not None else requests.Session()

    def version(self, timeout: float) -> VersionInfo:
        """
        Retrieve the control plane's version.

        Args:
            timeout: Deadline in seconds for the whole call, body included

        Returns:
            VersionInfo reported by the control plane

        Raises:
            requests.RequestException: If the request fails, times out or
                                       answers a non-2xx status
            InvalidVersionResponseError: If the payload is not a VersionInfo
        """
        url = f"{self.api_addr}{VERSION_PATH}"
        logger.debug(f"Fetching control plane version from {url}")

        deadline = time.monotonic() + timeout
        with self.session.get(url, timeout=timeout, verify=self.verify_tls,
                              stream=True) as response:
            response.raise_for_status()
            body = read_body(response, deadline)

        try:
            return VersionInfo.model_validate_json(body)
        except ValidationError as e:
            raise InvalidVersionResponseError(
                f"invalid version response from {url}: {e.error_count()} validation error(s)"
            ) from e

    def close(self):
        """Release pooled connections"""
        self.session.close()
