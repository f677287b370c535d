from typing import Any, Dict, List, Optional

from flask import current_app

from sitekit.errors import NotFoundError
from sitekit.extensions import db
from sitekit.models.analytics_config import AnalyticsConfig
from sitekit.utils.patch import apply_changes
from sitekit.utils.query import for_environment
from sitekit.utils.transaction import transactional

CONFIG_FIELDS = (
    "platform",
    "name",
    "tracking_id",
    "is_active",
    "environment",
    "additional_config",
    "priority",
)


def list_analytics_configs(
    *,
    active_only: bool = False,
    environment: Optional[str] = None,
) -> List[AnalyticsConfig]:
    query = AnalyticsConfig.alive()
    if active_only:
        query = query.filter(AnalyticsConfig.is_active.is_(True))
    query = for_environment(query, AnalyticsConfig, environment)
    return query.order_by(AnalyticsConfig.priority.asc(), AnalyticsConfig.created_at.asc()).all()


def get_analytics_config(*, config_id: str) -> AnalyticsConfig:
    config = AnalyticsConfig.alive().filter_by(id=config_id).first()
    if not config:
        raise NotFoundError("Analytics config not found")
    return config


def create_analytics_config(*, actor_id: str, data: Dict[str, Any]) -> AnalyticsConfig:
    config = AnalyticsConfig()
    apply_changes(config, data, fields=CONFIG_FIELDS)
    config.created_by_user_id = actor_id

    with transactional():
        db.session.add(config)

    current_app.logger.info(
        "Analytics config %s (%s) created by %s", config.id, config.platform, actor_id
    )
    return config


def update_analytics_config(*, config_id: str, data: Dict[str, Any]) -> AnalyticsConfig:
    config = get_analytics_config(config_id=config_id)
    with transactional():
        apply_changes(config, data, fields=CONFIG_FIELDS)
    return config


def delete_analytics_config(*, config_id: str) -> None:
    config = get_analytics_config(config_id=config_id)
    with transactional():
        config.soft_delete()
