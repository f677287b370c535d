from typing import Any, BinaryIO, Dict, Optional

from flask import current_app

from sitekit.errors import StorageError
from sitekit.extensions import db
from sitekit.models.media import Media
from sitekit.storage import StorageBackends
from sitekit.storage.base import StoredFile
from sitekit.utils.transaction import transactional


def store_file(
    backends: StorageBackends,
    stream: BinaryIO,
    *,
    original_name: str,
    mime_type: Optional[str],
) -> tuple[StoredFile, str]:
    """
    Store through the primary backend, falling back to local disk once.

    A failure of the local backend is not caught.
    """
    if backends.primary is not None:
        try:
            stored = backends.primary.upload(stream, original_name=original_name, mime_type=mime_type)
            return stored, backends.primary.storage_type
        except StorageError as exc:
            current_app.logger.warning("Primary storage failed, falling back to local disk: %s", exc)
            stream.seek(0)

    stored = backends.local.upload(stream, original_name=original_name, mime_type=mime_type)
    return stored, backends.local.storage_type


def upload_media(
    *,
    backends: StorageBackends,
    stream: BinaryIO,
    original_name: str,
    mime_type: Optional[str],
    actor_id: str,
    metadata: Dict[str, Any],
) -> Media:
    """
    Persist an uploaded file and record it.

    Responsibilities:
    - Pick the storage backend decided at startup
    - Record which backend actually holds the file
    """
    stored, storage_type = store_file(
        backends, stream, original_name=original_name, mime_type=mime_type
    )

    media = Media()
    media.filename = original_name
    media.url = stored.url
    media.storage_type = storage_type
    media.storage_path = stored.path
    media.mime_type = mime_type
    media.file_size = stored.size
    media.alt_text = metadata.get("alt_text")
    media.caption = metadata.get("caption")
    media.title = metadata.get("title")
    media.meta = {"stored_filename": stored.filename}
    media.uploaded_by_user_id = actor_id

    with transactional():
        db.session.add(media)

    current_app.logger.info("Media %s stored via %s by %s", media.id, storage_type, actor_id)
    return media
