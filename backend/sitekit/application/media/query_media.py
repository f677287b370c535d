from typing import List

from sitekit.errors import NotFoundError
from sitekit.models.media import Media
from sitekit.utils.pagination import OffsetMeta, OffsetParams, paginate_offset
from sitekit.utils.transaction import transactional


def list_media(*, params: OffsetParams) -> tuple[List[Media], OffsetMeta]:
    query = Media.alive().order_by(Media.created_at.desc(), Media.id.desc())
    return paginate_offset(query, params)


def get_media(*, media_id: str) -> Media:
    media = Media.alive().filter_by(id=media_id).first()
    if not media:
        raise NotFoundError("Media not found")
    return media


def delete_media(*, media_id: str) -> None:
    """Soft delete; the stored file is kept."""
    media = get_media(media_id=media_id)
    with transactional():
        media.soft_delete()
