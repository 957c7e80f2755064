"""Settings schema using Pydantic.

Values come from CLI flags, then ``SEAX_*`` environment variables, then the
defaults below.
"""

import math
import re
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from seax.client.client import DEFAULT_TIMEOUT, validate_instance_url
from seax.errors import ConfigError
from seax.output import OutputFormat
from seax.utils import validation_message

DEFAULT_INSTANCE_URL = "http://localhost:4000"

# Go-style durations: "10s", "1ms", "1m30s", "1.5h", "250us"
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}
_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(value: Any) -> float:
    """Convert a duration to seconds.

    Accepts numbers (seconds), numeric strings (seconds) and Go-style
    duration strings made of one or more ``<number><unit>`` parts.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")

    text = str(value).strip()
    if not text:
        raise ValueError("invalid duration: empty value")
    try:
        seconds = float(text)
    except ValueError:
        pass
    else:
        if not math.isfinite(seconds):
            raise ValueError(f"invalid duration: {text!r}")
        return seconds

    total = 0.0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART.match(text, pos)
        if not match:
            raise ValueError(f"invalid duration: {text!r}")
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    return total


class Settings(BaseSettings):
    """Runtime settings for one search invocation."""
    model_config = SettingsConfigDict(env_prefix="SEAX_", extra="ignore")

    url: str = Field(default=DEFAULT_INSTANCE_URL, description="SearXNG instance URL")
    format: OutputFormat = Field(default=OutputFormat.JSON, description="Output format (json or text)")
    timeout: float = Field(default=DEFAULT_TIMEOUT, description="Search timeout in seconds")

    @field_validator("url", mode="before")
    @classmethod
    def _check_url(cls, value: Any) -> str:
        try:
            return validate_instance_url(str(value))
        except ConfigError as e:
            raise ValueError(str(e)) from e

    @field_validator("format", mode="before")
    @classmethod
    def _check_format(cls, value: Any) -> Any:
        if isinstance(value, OutputFormat):
            return value
        if value not in {f.value for f in OutputFormat}:
            raise ValueError(f"invalid format: {value} (must be 'json' or 'text')")
        return value

    @field_validator("timeout", mode="before")
    @classmethod
    def _check_timeout(cls, value: Any) -> float:
        seconds = parse_duration(value)
        if seconds <= 0:
            raise ValueError(f"invalid timeout: {value} (must be positive)")
        return seconds


def load_settings(**overrides: Any) -> Settings:
    """Build Settings; ``None`` overrides are ignored so env/defaults apply.

    Raises:
        ConfigError: If any value fails validation.
    """
    explicit = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**explicit)
    except ValidationError as e:
        raise ConfigError(validation_message(e)) from e
