"""Narrative Port Interface."""

from abc import ABC, abstractmethod


class NarrativePort(ABC):
    """Abstract interface for circuit history text generators."""

    @abstractmethod
    def generate_history(
        self,
        circuit_name: str,
        race_name: str,
        locality: str,
        country: str,
    ) -> str | None:
        """Generate a historical narrative for a circuit, or None on failure."""
        ...
