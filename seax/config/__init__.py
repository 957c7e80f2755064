"""Configuration module for seax."""

from seax.config.schema import Settings, load_settings, parse_duration

__all__ = ["Settings", "load_settings", "parse_duration"]
