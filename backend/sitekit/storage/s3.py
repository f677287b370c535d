import logging
from typing import BinaryIO, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from sitekit.errors import StorageError
from sitekit.models.enums import StorageType
from sitekit.utils.media import generate_filename, stream_size
from .base import StoredFile

logger = logging.getLogger(__name__)


class S3Storage:
    """Object-storage backend (AWS S3 or any S3-compatible endpoint)."""

    storage_type = StorageType.S3.value

    def __init__(self, *, bucket: str, region: str, client=None, public_url: Optional[str] = None):
        self.bucket = bucket
        self.region = region
        self.client = client
        self.public_url = (public_url or f"https://{bucket}.s3.{region}.amazonaws.com").rstrip("/")

    @classmethod
    def from_config(cls, config):
        client = boto3.client(
            "s3",
            region_name=config["S3_REGION"],
            aws_access_key_id=config["S3_ACCESS_KEY_ID"],
            aws_secret_access_key=config["S3_SECRET_ACCESS_KEY"],
            endpoint_url=config.get("S3_ENDPOINT_URL"),
        )
        return cls(
            bucket=config["S3_BUCKET"],
            region=config["S3_REGION"],
            client=client,
            public_url=config.get("S3_PUBLIC_URL"),
        )

    def upload(self, stream: BinaryIO, *, original_name: str, mime_type: Optional[str], folder: str = "media") -> StoredFile:
        filename = generate_filename(original_name)
        key = f"{folder}/{filename}"
        size = stream_size(stream)

        extra_args = {"ContentType": mime_type} if mime_type else {}
        try:
            self.client.upload_fileobj(stream, self.bucket, key, ExtraArgs=extra_args)
        except (BotoCoreError, ClientError) as exc:
            raise StorageError(f"S3 upload of {key} failed: {exc}") from exc

        logger.info("File uploaded to s3://%s/%s", self.bucket, key)

        return StoredFile(
            url=f"{self.public_url}/{key}",
            path=key,
            filename=filename,
            size=size,
            mime_type=mime_type,
        )
