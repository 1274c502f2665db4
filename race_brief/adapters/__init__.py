"""Adapters connecting the core to providers, storage and the CLI."""
