"""
Latest-version lookup against the Linkerd versioncheck feed
"""

import json
import logging
import time
from typing import Dict, Optional

import requests

from linkerd.version.errors import (
    FeedDecodeError,
    UnexpectedResponseError,
    UnsupportedChannelError,
)
from linkerd.version.running import RunningVersion
from linkerd.version.transport import read_body

logger = logging.getLogger(__name__)

VERSION_CHECK_URL = "https://versioncheck.linkerd.io/version.json"
VERSION_CHECK_TIMEOUT = 5.0


def _decode_feed(body: bytes) -> Dict[str, str]:
    """Decode the feed body into a channel -> revision mapping"""
    try:
        data = json.loads(body)
    except ValueError as e:
        raise FeedDecodeError(f"invalid versioncheck response: {e}") from e

    if not isinstance(data, dict):
        raise FeedDecodeError(
            f"invalid versioncheck response: expected an object, got {type(data).__name__}"
        )

    for channel, revision in data.items():
        if not isinstance(revision, str):
            raise FeedDecodeError(
                f"invalid versioncheck response: revision for {channel} is not a string"
            )

    return data


def get_latest_version(running: RunningVersion,
                       installation_id: str,
                       source: str,
                       url: str = VERSION_CHECK_URL,
                       timeout: float = VERSION_CHECK_TIMEOUT,
                       verify_tls: bool = True,
                       session: Optional[requests.Session] = None) -> str:
    """
    Look up the latest revision published for the running channel.

    The installation id and source are sent for telemetry attribution only.
    Whether the returned revision is newer than the running one is left to
    the caller.

    Args:
        running: Version of this process
        installation_id: Anonymised installation identifier
        source: Where the check originates (e.g. "cli", "web")
        url: Versioncheck feed URL
        timeout: Deadline in seconds for the whole call, body included
        verify_tls: Whether to verify TLS certificates
        session: Optional requests session (default: a one-shot session)

    Returns:
        Latest revision for the running channel

    Raises:
        TransportError: If the request fails or times out
        UnexpectedResponseError: If the feed does not answer 200
        FeedDecodeError: If the body is not a flat JSON object of strings
        MalformedVersionError: If the running version has no channel
        UnsupportedChannelError: If the running channel is not in the feed

    With a running version of "edge-20.1.1" and a feed answering
    {"edge": "21.1.1", "stable": "2.9.0"}, the result is "21.1.1".
    """
    params = {
        'version': running.value,
        'uuid': installation_id,
        'source': source,
    }
    client = session if session is not None else requests.Session()

    logger.debug(f"Checking latest version at {url}")

    deadline = time.monotonic() + timeout
    try:
        # The with block closes the streamed response on every path
        with client.get(url, params=params, timeout=timeout, verify=verify_tls,
                        stream=True) as response:
            if response.status_code != 200:
                logger.debug(f"Versioncheck answered {response.status_code}")
                # Drained unparsed so the connection can return to the pool
                read_body(response, deadline)
                raise UnexpectedResponseError(response.status_code, response.reason or "")

            versions = _decode_feed(read_body(response, deadline))
    finally:
        if session is None:
            client.close()

    channel = running.identifier.channel
    if channel not in versions:
        raise UnsupportedChannelError(channel)

    return versions[channel]
