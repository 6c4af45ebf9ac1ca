import logging
from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from soundboard.core.config import Settings, settings
from soundboard.core.exceptions import StorageError

logger = logging.getLogger(__name__)

AUDIO_CACHE_CONTROL = "public, max-age=31536000"
_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


class StorageService:
    """
    Bucket access through the S3-compatible XML API of Google Cloud Storage.

    Every method blocks; async callers run them in the thread pool.
    """

    def __init__(self, client, bucket_name: str, endpoint_url: str):
        self.s3_client = client
        self.bucket_name = bucket_name
        self.endpoint_url = endpoint_url.rstrip("/")

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "StorageService":
        client = boto3.client(
            "s3",
            endpoint_url=config.STORAGE_ENDPOINT_URL,
            aws_access_key_id=config.STORAGE_ACCESS_KEY_ID or None,
            aws_secret_access_key=config.STORAGE_SECRET_ACCESS_KEY or None,
            region_name=config.STORAGE_REGION,
            config=Config(
                connect_timeout=config.STORAGE_TIMEOUT,
                read_timeout=config.STORAGE_TIMEOUT,
                s3={"addressing_style": "path"},
            ),
        )
        return cls(client, config.GCP_BUCKET_NAME, config.STORAGE_ENDPOINT_URL)

    def public_url(self, key: str) -> str:
        return f"{self.endpoint_url}/{self.bucket_name}/{key}"

    @staticmethod
    def key_from_url(url: str) -> Optional[str]:
        """Final path segment of a public URL, which is the key of top-level objects."""
        key = url.rstrip("/").rsplit("/", 1)[-1] if url else ""
        return key or None

    def upload_bytes(
        self,
        key: str,
        data: bytes,
        content_type: str,
        cache_control: str = AUDIO_CACHE_CONTROL,
    ) -> str:
        """Store ``data`` under ``key`` and return its public URL."""
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
                CacheControl=cache_control,
            )
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Error uploading to Google Cloud Storage: {e}") from e
        logger.info("Uploaded %s (%d bytes)", key, len(data))
        return self.public_url(key)

    def object_exists(self, key: str) -> bool:
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=key)
            return True
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in _MISSING_CODES:
                return False
            raise StorageError(f"Error checking {key}: {e}") from e
        except BotoCoreError as e:
            raise StorageError(f"Error checking {key}: {e}") from e

    def delete_object(self, key: str) -> None:
        try:
            self.s3_client.delete_object(Bucket=self.bucket_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise StorageError(f"Failed to delete {key}: {e}") from e
        logger.info("Deleted %s", key)

    def close(self) -> None:
        self.s3_client.close()
