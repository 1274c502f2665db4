"""Publishing Port Interfaces."""

from abc import ABC, abstractmethod


class BlobPublisherPort(ABC):
    """Abstract interface for blob storage uploads."""

    @abstractmethod
    def publish(self, document: str, name: str) -> str:
        """Upload a serialized document and return a confirmation message.

        Raises:
            PublishError: If the upload failed.
        """
        ...


class NotifierPort(ABC):
    """Abstract interface for success/failure notifications."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Send a notification. Must not raise on delivery failure."""
        ...
