import logging
import os
from typing import BinaryIO, Optional

from sitekit.errors import StorageError
from sitekit.models.enums import StorageType
from sitekit.utils.media import generate_filename, stream_size
from .base import StoredFile

logger = logging.getLogger(__name__)


class LocalStorage:
    """Writes uploads below ``upload_dir`` and serves them from ``base_url``."""

    storage_type = StorageType.LOCAL.value

    def __init__(self, upload_dir: str, base_url: str):
        self.upload_dir = upload_dir
        self.base_url = base_url.rstrip("/")

    def upload(self, stream: BinaryIO, *, original_name: str, mime_type: Optional[str], folder: str = "media") -> StoredFile:
        filename = generate_filename(original_name)
        folder_path = os.path.join(self.upload_dir, folder)
        relative_path = f"{folder}/{filename}"

        try:
            os.makedirs(folder_path, exist_ok=True)
            size = stream_size(stream)
            with open(os.path.join(folder_path, filename), "wb") as fh:
                fh.write(stream.read())
        except OSError as exc:
            raise StorageError(f"Failed to write {relative_path}: {exc}") from exc

        logger.info("File uploaded to local storage: %s", relative_path)

        return StoredFile(
            url=f"{self.base_url}/{relative_path}",
            path=relative_path,
            filename=filename,
            size=size,
            mime_type=mime_type,
        )
