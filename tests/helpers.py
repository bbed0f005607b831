"""Shared test doubles for HTTP sessions and the control plane API."""
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import MagicMock

from linkerd.api.models import VersionInfo


def make_response(status_code=200, body=b"", reason="OK"):
    """Build a mock requests response usable as a context manager."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    response.content = body if isinstance(body, bytes) else json.dumps(body).encode()
    response.iter_content.side_effect = lambda chunk_size=1: iter([response.content])
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    return response


def make_session(response=None, error=None):
    """Build a mock requests session whose get() returns or raises."""
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return session


class FakeVersionApi:
    """Control plane double returning a canned version or raising."""

    def __init__(self, release_version="", error=None):
        self.release_version = release_version
        self.error = error
        self.calls = []

    def version(self, timeout):
        self.calls.append(timeout)
        if self.error is not None:
            raise self.error
        return VersionInfo(release_version=self.release_version)


class SlowPeerHandler(BaseHTTPRequestHandler):
    """
    Serves a JSON body slowly: "drip" sends one byte per interval,
    "stall" sends the headers and then nothing until released.
    """

    body = b'{"edge": "21.1.1", "release_version": "edge-21.1.1"}'
    mode = "drip"
    interval = 0.1
    release = None

    def do_GET(self):
        try:
            self.send_response(200)
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(self.body)))
            self.end_headers()
            self.wfile.flush()

            if self.mode == "stall":
                self.release.wait(10)
                return

            for i in range(len(self.body)):
                if self.release.wait(self.interval):
                    return
                self.wfile.write(self.body[i:i + 1])
                self.wfile.flush()
        except OSError:
            # Client gave up and closed the connection
            pass

    def log_message(self, format, *args):
        pass


def serve_slow_peer(mode):
    """Start a slow peer on a free local port; returns (server, base_url)."""
    handler = type("Handler", (SlowPeerHandler,), {
        "mode": mode,
        "release": threading.Event(),
    })
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return server, f"http://127.0.0.1:{server.server_address[1]}"


def stop_slow_peer(server):
    server.RequestHandlerClass.release.set()
    server.shutdown()
    server.server_close()
