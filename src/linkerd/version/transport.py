"""
Deadline-bounded reads of HTTP response bodies
"""

import time

import requests

# Version payloads are a few hundred bytes. Reading one byte at a time lets
# the deadline be checked between every socket read.
READ_CHUNK_SIZE = 1


def read_body(response: requests.Response, deadline: float) -> bytes:
    """
    Read a streamed response body before a wall-clock deadline.

    The requests timeout only bounds each individual socket read, so a peer
    trickling its body can otherwise hold the call open indefinitely.

    Args:
        response: Response opened with stream=True
        deadline: time.monotonic() value by which the body must be read

    Returns:
        The full response body

    Raises:
        requests.Timeout: If the deadline passes before the body is read
    """
    chunks = []
    for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
        if time.monotonic() > deadline:
            raise requests.Timeout(
                f"response from {response.url} not read within deadline",
                response=response
            )
        chunks.append(chunk)

    return b"".join(chunks)

