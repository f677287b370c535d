from typing import Any, Dict

from flask import current_app

from sitekit.errors import ConflictError
from sitekit.extensions import db
from sitekit.models.content import Content
from sitekit.models.enums import ContentStatus
from sitekit.domain.lifecycle.content import apply_status, reading_time
from sitekit.utils.transaction import transactional
from .lookups import resolve_category, resolve_tags, slug_taken


def create_content(
    *,
    author_id: str,
    data: Dict[str, Any],
) -> Content:
    """
    Create content, DRAFT unless the payload says otherwise.

    Edge cases handled:
    - Duplicate slug among live content
    - Unknown category (404)
    - Unknown tag ids (silently dropped)
    """
    if slug_taken(data["slug"]):
        raise ConflictError("A content with this slug already exists")

    content = Content()
    content.title = data["title"]
    content.slug = data["slug"]
    content.body = data["body"]
    content.type = data["type"]
    content.excerpt = data.get("excerpt")
    content.featured_image = data.get("featured_image")
    content.author_id = author_id
    content.status = ContentStatus.DRAFT.value
    apply_status(content, data.get("status") or ContentStatus.DRAFT.value)
    content.reading_time = reading_time(content.body)

    content.category = resolve_category(data.get("category_id"))
    content.tags = resolve_tags(data.get("tag_ids"))

    with transactional(conflict="A content with this slug already exists"):
        db.session.add(content)

    current_app.logger.info("Content %s created by %s", content.id, author_id)
    return content
