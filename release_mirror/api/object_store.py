"""
S3-compatible object store client.

This module provides the object sink used by the transfer pipeline. Each
asset is written with a single ``put_object`` call whose body is read
incrementally from the download stream.
"""

# Standard library imports
import logging
from typing import Any

# Third-party imports
import boto3
from botocore.config import Config

# Local imports
from ..exceptions import UploadError
from ..protocols import ReadableBody
from ..utils.constants import DEFAULT_REGION, OBJECT_STORE_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class ObjectStoreClient:
    """Client for writing objects to an S3-compatible store such as Cloudflare R2."""

    def __init__(
        self,
        endpoint_url: str,
        access_key_id: str,
        access_key_secret: str,
        region: str = DEFAULT_REGION,
    ) -> None:
        """Initialize the object store client.

        Args:
            endpoint_url: Store endpoint URL
            access_key_id: Access key id
            access_key_secret: Secret access key
            region: Region name; R2 accepts "auto"
        """
        self.endpoint_url = endpoint_url
        self.region = region
        self.client = self._create_client(access_key_id, access_key_secret)

    def _create_client(self, access_key_id: str, access_key_secret: str) -> Any:
        """Create a boto3 S3 client.

        Requests are sent once: the body is a one-shot stream that cannot be
        rewound for a retry. The payload is sent unsigned and checksums are
        only computed when an operation requires them, so the body is never
        read ahead of the upload.
        """
        return boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            aws_access_key_id=access_key_id,
            aws_secret_access_key=access_key_secret,
            region_name=self.region,
            config=Config(
                signature_version="s3v4",
                retries={"total_max_attempts": OBJECT_STORE_MAX_ATTEMPTS, "mode": "standard"},
                request_checksum_calculation="when_required",
                response_checksum_validation="when_required",
                s3={"payload_signing_enabled": False},
            ),
        )

    def put(self, bucket: str, key: str, body: ReadableBody, length: int) -> None:
        """Write an object from a streaming body.

        Args:
            bucket: Destination bucket
            key: Destination key
            body: File-like body, read once
            length: Declared content length in bytes

        Raises:
            UploadError: If the store rejects the write or the body fails mid-stream
        """
        logger.debug("PUT s3://%s/%s (%d bytes)", bucket, key, length)
        try:
            self.client.put_object(Bucket=bucket, Key=key, Body=body, ContentLength=length)
        except Exception as e:
            raise UploadError(f"Unable to upload {key} to bucket {bucket}: {e}") from e

    def close(self) -> None:
        """Close the client's connection pool."""
        self.client.close()


__all__ = ["ObjectStoreClient"]
