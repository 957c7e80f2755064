"""CLI module for seax."""
