"""Shared error types for seax.

Every failure is terminal: library code raises one of these with the
underlying cause chained, and only the CLI turns it into an exit status.
"""


class SeaxError(Exception):
    """Base error for seax."""


class ConfigError(SeaxError):
    """Flag, environment value or client option is invalid."""


class InputError(SeaxError):
    """Query could not be read from standard input, or is empty."""


class TransportError(SeaxError):
    """Request failed (construction/network/timeout/non-200 status)."""


class DecodeError(SeaxError):
    """Response body is not the expected JSON shape."""
