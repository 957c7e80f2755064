"""Shared fixtures: isolate tests from the caller's environment."""

import threading
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest
from loguru import logger

_ENV_VARS = (
    "SEAX_URL",
    "SEAX_FORMAT",
    "SEAX_TIMEOUT",
    "LOG_LEVEL",
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "ALL_PROXY",
    "http_proxy",
    "https_proxy",
    "all_proxy",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop seax settings and proxy variables so httpx talks to the test transport."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI runs bind loguru to CliRunner's stderr; don't let that sink outlive the test."""
    yield
    logger.remove()


@pytest.fixture
def local_server():
    """Start a real HTTP server whose GET is handled by ``do_get(handler)``; returns its base URL."""
    servers: list[ThreadingHTTPServer] = []

    def start(do_get: Callable[[BaseHTTPRequestHandler], None]) -> str:
        class Handler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:
                try:
                    do_get(self)
                except (BrokenPipeError, ConnectionResetError):
                    pass

            def send_json_headers(self, length: int, status: int = 200) -> None:
                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(length))
                self.end_headers()

            def log_message(self, format, *args) -> None:
                pass

        server = ThreadingHTTPServer(("127.0.0.1", 0), Handler)
        server.daemon_threads = True
        threading.Thread(target=server.serve_forever, daemon=True).start()
        servers.append(server)
        return f"http://127.0.0.1:{server.server_address[1]}"

    yield start

    for server in servers:
        server.shutdown()
        server.server_close()
