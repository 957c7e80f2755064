"""CLI commands for seax."""

import sys
from typing import TextIO

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from seax import __logo__, __version__
from seax.client.client import SearchClient
from seax.config.schema import DEFAULT_INSTANCE_URL, Settings, load_settings
from seax.errors import ConfigError, DecodeError, InputError, SeaxError, TransportError
from seax.logging_config import setup_logging
from seax.output import render

app = typer.Typer(
    name="seax",
    help=f"{__logo__} seax - read a query from stdin and search a SearXNG instance",
    add_completion=False,
)

err_console = Console(stderr=True)


def version_callback(value: bool):
    if value:
        typer.echo(f"{__logo__} seax v{__version__}")
        raise typer.Exit()


# ============================================================================
# Pipeline: settings -> query -> request -> render
# ============================================================================


def read_query(stream: TextIO) -> str:
    """Read exactly one line and trim it. A last line without newline is fine."""
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"failed to read input: {e}") from e
    if not line:
        raise InputError("failed to read input: no query on standard input")

    query = line.strip()
    if not query:
        raise InputError("search query cannot be empty")
    return query


def run(settings: Settings, stdin: TextIO) -> str:
    """Execute one search and return the rendered output."""
    query = read_query(stdin)
    client = SearchClient(settings.url, timeout=settings.timeout)
    logger.debug("Searching {} (format={}, timeout={:g}s)", settings.url, settings.format.value, settings.timeout)

    try:
        response = client.search(query)
    except (TransportError, DecodeError) as e:
        raise type(e)(f"search failed: {e}") from e

    logger.debug("Got {} results", len(response.results))
    return render(response, settings.format, query)


# ============================================================================
# Entry point
# ============================================================================


@app.command()
def search(
    url: str = typer.Option(
        None, "--url", "-url",
        help=f"SearXNG instance URL [default: {DEFAULT_INSTANCE_URL}]",
        show_default=False,
    ),
    output_format: str = typer.Option(
        None, "--format", "-format",
        help="Output format: json or text [default: json]",
        show_default=False,
    ),
    timeout: str = typer.Option(
        None, "--timeout", "-timeout",
        help="Search timeout, e.g. 10s, 500ms, 1m30s [default: 10s]",
        show_default=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Debug logging to stderr"),
    version: bool = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit",
    ),
):
    """Read one line from stdin, search for it and print the results."""
    setup_logging("DEBUG" if verbose else None)

    try:
        try:
            settings = load_settings(url=url, format=output_format, timeout=timeout)
        except ConfigError as e:
            raise ConfigError(f"failed to parse flags: {e}") from e
        output = run(settings, sys.stdin)
    except SeaxError as e:
        logger.debug("Aborting: {!r}", e)
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True, highlight=False)
        raise typer.Exit(1)

    typer.echo(output)


if __name__ == "__main__":
    app()
