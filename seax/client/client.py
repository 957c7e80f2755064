"""Synchronous client for a SearXNG-compatible ``/search`` endpoint."""

import json
import time
from urllib.parse import urlparse

import httpx
from loguru import logger
from pydantic import ValidationError

from seax import __version__
from seax.client.models import SearchResponse
from seax.errors import ConfigError, DecodeError, TransportError
from seax.utils import validation_message

DEFAULT_TIMEOUT = 10.0  # seconds
SEARCH_PATH = "/search"
USER_AGENT = f"seax/{__version__}"
ALLOWED_PROTOCOLS = {"http", "https"}


def validate_instance_url(url: str) -> str:
    """Return ``url`` without trailing slashes if it is an http(s) URL with a host.

    Raises:
        ConfigError: If the scheme is not http/https or the host is missing.
    """
    parsed = urlparse(url.strip())
    scheme = parsed.scheme.lower()
    if scheme not in ALLOWED_PROTOCOLS:
        raise ConfigError(
            f"invalid instance URL {url!r}: only http/https allowed, got '{scheme or 'none'}'"
        )
    if not parsed.netloc:
        raise ConfigError(f"invalid instance URL {url!r}: missing host")
    return url.strip().rstrip("/")


class SearchClient:
    """Issue one search request per call; no retries, no shared connection pool."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        if timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {timeout}")
        self.base_url = validate_instance_url(base_url)
        self.timeout = timeout
        self._transport = transport

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{SEARCH_PATH}"

    def search(self, query: str) -> SearchResponse:
        """Run ``query`` against the instance and decode the results.

        ``timeout`` is a deadline for the whole exchange, body included.

        Raises:
            TransportError: Network failure, timeout, or a status other than 200.
            DecodeError: The body is not JSON or not the expected shape.
        """
        deadline = time.monotonic() + self.timeout
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                logger.debug("GET {} q={!r}", self.search_url, query)
                with client.stream(
                    "GET",
                    self.search_url,
                    params={"q": query, "format": "json"},
                    headers={"Accept": "application/json", "User-Agent": USER_AGENT},
                ) as response:
                    body = _read_body(response, deadline)
        except httpx.TimeoutException as e:
            raise TransportError(
                f"failed to perform request: timed out after {self.timeout:g}s ({type(e).__name__})"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"failed to perform request: {e}") from e

        logger.debug("{} responded {} ({} bytes)", response.url, response.status_code, len(body))

        if response.status_code != httpx.codes.OK:
            text = body.decode(response.encoding or "utf-8", errors="replace")
            raise TransportError(f"unexpected status code {response.status_code}: {text}")

        try:
            payload = json.loads(body)
        except ValueError as e:
            raise DecodeError(f"failed to decode response: {e}") from e
        try:
            return SearchResponse.from_json(payload)
        except ValidationError as e:
            raise DecodeError(f"failed to decode response: {validation_message(e)}") from e


def _read_body(response: httpx.Response, deadline: float) -> bytes:
    """Read the streamed body, failing once ``deadline`` has passed."""
    body = bytearray()
    for chunk in response.iter_bytes():
        body.extend(chunk)
        if time.monotonic() > deadline:
            raise httpx.ReadTimeout("deadline exceeded while reading body", request=response.request)
    if time.monotonic() > deadline:
        raise httpx.ReadTimeout("deadline exceeded", request=response.request)
    return bytes(body)


def search(base_url: str, query: str, timeout: float = DEFAULT_TIMEOUT) -> SearchResponse:
    """One-shot helper: ``SearchClient(base_url, timeout=timeout).search(query)``."""
    return SearchClient(base_url, timeout=timeout).search(query)
