from typing import Any, Dict

from flask import current_app

from sitekit.errors import NotFoundError
from sitekit.extensions import db
from sitekit.models.content import Content
from sitekit.models.seo_metadata import SeoMetadata
from sitekit.normalizers.seo import SEO_FIELDS
from sitekit.utils.patch import apply_changes
from sitekit.utils.transaction import transactional


def find_metadata(content_id: str):
    return SeoMetadata.alive().filter_by(content_id=content_id).first()


def get_metadata(*, content_id: str) -> SeoMetadata:
    metadata = find_metadata(content_id)
    if not metadata:
        raise NotFoundError("SEO metadata not found")
    return metadata


def upsert_metadata(*, data: Dict[str, Any]) -> SeoMetadata:
    """
    Create or overwrite the SEO metadata of a content.

    Metadata without a content id is always inserted as a new row.
    """
    content_id = data.get("content_id")
    metadata = None

    if content_id:
        if not Content.alive().filter_by(id=content_id).first():
            raise NotFoundError("Content not found")
        metadata = find_metadata(content_id)

    created = metadata is None
    if created:
        metadata = SeoMetadata()
        metadata.content_id = content_id

    with transactional():
        apply_changes(metadata, data, fields=SEO_FIELDS)
        if created:
            db.session.add(metadata)

    current_app.logger.info(
        "SEO metadata %s for content %s", "created" if created else "updated", content_id
    )
    return metadata
