"""Local filesystem adapter writing the report document to disk."""

from pathlib import Path

from ....core.domain.exceptions import PublishError
from ....core.ports import BlobPublisherPort


class LocalFilePublisherAdapter(BlobPublisherPort):
    """Writes documents into a local directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def publish(self, document: str, name: str) -> str:
        path = self.directory / name
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(document, encoding="utf-8")
        except OSError as e:
            raise PublishError(f"Failed to write {path}", cause=e, context={"path": str(path)}) from e
        return f"Written to {path}"
