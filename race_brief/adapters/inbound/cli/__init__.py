"""Command line entry point."""

from .commands import app

__all__ = ["app"]
