"""Amazon S3 adapter for publishing the report document."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from ....core.domain.exceptions import PublishError
from ....core.ports import BlobPublisherPort

logger = logging.getLogger(__name__)


class S3PublisherAdapter(BlobPublisherPort):
    """Uploads documents to an S3 bucket with a boto3 client."""

    def __init__(self, client: Any, bucket: str, prefix: str = "") -> None:
        """Initialize the publisher.

        Args:
            client: boto3 S3 client.
            bucket: Target bucket name.
            prefix: Optional key prefix, without trailing slash.
        """
        self.client = client
        self.bucket = bucket
        self.prefix = prefix.strip("/")

    def _key(self, name: str) -> str:
        return f"{self.prefix}/{name}" if self.prefix else name

    def publish(self, document: str, name: str) -> str:
        key = self._key(name)
        try:
            self.client.put_object(
                Bucket=self.bucket,
                Key=key,
                Body=document.encode("utf-8"),
                ContentType="application/json",
            )
        except (BotoCoreError, ClientError) as e:
            raise PublishError(
                f"Failed to upload {key} to S3",
                cause=e,
                context={"bucket": self.bucket, "key": key},
            ) from e

        return f"Uploaded to S3: s3://{self.bucket}/{key}"
