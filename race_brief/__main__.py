"""Allow ``python -m race_brief``."""

from .adapters.inbound.cli import app

if __name__ == "__main__":
    app()
