from flask import current_app

from sitekit.utils.transaction import transactional
from .lookups import get_alive_content


def delete_content(*, content_id: str, actor_id: str) -> None:
    """
    Soft-delete content. Versions stay behind as history.
    """
    content = get_alive_content(content_id)

    with transactional():
        content.soft_delete()

    current_app.logger.info("Content %s deleted by %s", content_id, actor_id)
