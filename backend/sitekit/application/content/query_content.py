from typing import Any, Dict, List, Optional

from sqlalchemy import or_

from sitekit.errors import NotFoundError
from sitekit.models.content import Content
from sitekit.models.content_version import ContentVersion
from sitekit.models.enums import ContentStatus
from sitekit.models.tag import Tag
from sitekit.utils.pagination import OffsetMeta, OffsetParams, paginate_offset
from .lookups import get_alive_content


def list_contents(
    *,
    filters: Dict[str, Any],
    params: OffsetParams,
) -> tuple[List[Content], OffsetMeta]:
    """
    List content newest first.

    Supported filters: type, status, category_id, author_id, tag_slug, search.
    """
    query = Content.alive()

    if content_type := filters.get("type"):
        query = query.filter(Content.type == content_type)

    if status := filters.get("status"):
        query = query.filter(Content.status == status)

    if category_id := filters.get("category_id"):
        query = query.filter(Content.category_id == category_id)

    if author_id := filters.get("author_id"):
        query = query.filter(Content.author_id == author_id)

    if search := filters.get("search"):
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Content.title.ilike(pattern),
                Content.body.ilike(pattern),
                Content.excerpt.ilike(pattern),
            )
        )

    if tag_slug := filters.get("tag_slug"):
        query = query.join(Content.tags).filter(
            Tag.slug == tag_slug,
            Tag.deleted_at.is_(None),
        )

    query = query.order_by(Content.created_at.desc(), Content.id.desc())
    return paginate_offset(query, params)


def find_content_by_slug(*, slug: str, include_drafts: bool = False) -> Content:
    query = Content.alive().filter_by(slug=slug)

    if not include_drafts:
        query = query.filter(Content.status == ContentStatus.PUBLISHED.value)

    content = query.first()
    if not content:
        raise NotFoundError("Content not found")
    return content


def get_content(*, content_id: str) -> Content:
    return get_alive_content(content_id)


def list_versions(*, content_id: str) -> List[ContentVersion]:
    get_alive_content(content_id)
    return (
        ContentVersion.query
        .filter_by(content_id=content_id)
        .order_by(ContentVersion.version.desc())
        .all()
    )


def list_published(*, limit: Optional[int] = None) -> List[Content]:
    """Published content in sitemap order: newest first, id as tie-break."""
    query = (
        Content.alive()
        .filter(Content.status == ContentStatus.PUBLISHED.value)
        .order_by(Content.created_at.desc(), Content.id.desc())
    )
    if limit:
        query = query.limit(limit)
    return query.all()
