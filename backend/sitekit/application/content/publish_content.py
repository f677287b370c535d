# sitekit/application/content/publish_content.py
from flask import current_app

from sitekit.models.content import Content
from sitekit.models.enums import ContentStatus
from sitekit.domain.lifecycle.content import apply_status
from sitekit.utils.transaction import transactional
from .lookups import get_alive_content


def publish_content(*, content_id: str) -> Content:
    """Set status to published and stamp published_at."""
    content = get_alive_content(content_id)

    with transactional():
        apply_status(content, ContentStatus.PUBLISHED.value)

    current_app.logger.info("Content %s published", content.id)
    return content


def unpublish_content(*, content_id: str) -> Content:
    """Return content to draft; published_at is kept as history."""
    content = get_alive_content(content_id)

    with transactional():
        apply_status(content, ContentStatus.DRAFT.value)

    current_app.logger.info("Content %s unpublished", content.id)
    return content
