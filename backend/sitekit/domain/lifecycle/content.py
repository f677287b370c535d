import math
from datetime import datetime, timezone

from sitekit.models.enums import ContentStatus

WORDS_PER_MINUTE = 200


def reading_time(body: str) -> int:
    """Minutes needed to read `body` at 200 words per minute, rounded up."""
    return math.ceil(len(body.split()) / WORDS_PER_MINUTE)


def apply_status(content, status: str) -> None:
    """
    Moves content to `status`.

    Entering `published` stamps published_at. Leaving it does not clear the
    stamp, so unpublished content keeps the date it first went live.
    """
    target = ContentStatus(status).value
    entering_published = (
        target == ContentStatus.PUBLISHED.value
        and (content.status != target or content.published_at is None)
    )

    content.status = target
    if entering_published:
        content.published_at = datetime.now(timezone.utc)
