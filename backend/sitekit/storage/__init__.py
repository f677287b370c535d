from dataclasses import dataclass
from typing import Optional

from .base import MediaStorage, StoredFile
from .local import LocalStorage
from .s3 import S3Storage


def s3_configured(config) -> bool:
    return all(
        config.get(key)
        for key in ("S3_BUCKET", "S3_ACCESS_KEY_ID", "S3_SECRET_ACCESS_KEY")
    )


@dataclass
class StorageBackends:
    """Storage decision made once at startup: an optional primary and the local fallback."""

    local: LocalStorage
    primary: Optional[MediaStorage] = None


def build_storage_backends(config) -> StorageBackends:
    local = LocalStorage(
        upload_dir=config["UPLOAD_FOLDER"],
        base_url=f"{config['APP_URL'].rstrip('/')}/uploads",
    )
    primary = S3Storage.from_config(config) if s3_configured(config) else None
    return StorageBackends(local=local, primary=primary)
