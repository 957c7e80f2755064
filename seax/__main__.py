"""Allow ``python -m seax``."""

from seax.cli.commands import app

if __name__ == "__main__":
    app()
