from typing import Any, Dict, List, Optional

from flask import current_app

from sitekit.errors import NotFoundError
from sitekit.extensions import db
from sitekit.models.custom_script import CustomScript
from sitekit.utils.patch import apply_changes
from sitekit.utils.query import for_environment
from sitekit.utils.transaction import transactional

SCRIPT_FIELDS = (
    "name",
    "script_content",
    "position",
    "target_pages",
    "content_types",
    "priority",
    "is_active",
    "environment",
)


def list_custom_scripts(
    *,
    active_only: bool = False,
    position: Optional[str] = None,
    environment: Optional[str] = None,
) -> List[CustomScript]:
    query = CustomScript.alive()
    if active_only:
        query = query.filter(CustomScript.is_active.is_(True))
    if position:
        query = query.filter(CustomScript.position == position)
    query = for_environment(query, CustomScript, environment)
    return query.order_by(CustomScript.priority.asc(), CustomScript.created_at.asc()).all()


def get_custom_script(*, script_id: str) -> CustomScript:
    script = CustomScript.alive().filter_by(id=script_id).first()
    if not script:
        raise NotFoundError("Custom script not found")
    return script


def create_custom_script(*, actor_id: str, data: Dict[str, Any]) -> CustomScript:
    script = CustomScript()
    apply_changes(script, data, fields=SCRIPT_FIELDS)
    script.created_by_user_id = actor_id

    with transactional():
        db.session.add(script)

    current_app.logger.info("Custom script %s created by %s", script.id, actor_id)
    return script


def update_custom_script(*, script_id: str, data: Dict[str, Any]) -> CustomScript:
    script = get_custom_script(script_id=script_id)
    with transactional():
        apply_changes(script, data, fields=SCRIPT_FIELDS)
    return script


def delete_custom_script(*, script_id: str) -> None:
    script = get_custom_script(script_id=script_id)
    with transactional():
        script.soft_delete()
