from . import iso


def normalize_media(media, admin=False):
    data = {
        "id": media.id,
        "filename": media.filename,
        "url": media.url,
        "storage_type": media.storage_type,
        "mime_type": media.mime_type,
        "file_size": media.file_size,
        "width": media.width,
        "height": media.height,
        "alt_text": media.alt_text,
        "caption": media.caption,
        "title": media.title,
        "created_at": iso(media.created_at),
    }

    if admin:
        data["storage_path"] = media.storage_path
        data["uploaded_by_user_id"] = media.uploaded_by_user_id
        data["metadata"] = media.meta or {}

    return data
