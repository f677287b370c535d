from typing import Any, Dict, List, Optional

from flask import current_app
from sqlalchemy import case

from sitekit.errors import ConflictError, NotFoundError
from sitekit.extensions import db
from sitekit.models.feature_flag import FeatureFlag
from sitekit.utils.patch import apply_changes
from sitekit.utils.query import for_environment
from sitekit.utils.transaction import transactional

FLAG_FIELDS = ("flag_name", "description", "is_enabled", "environment")


def list_feature_flags(*, environment: Optional[str] = None) -> List[FeatureFlag]:
    query = for_environment(FeatureFlag.alive(), FeatureFlag, environment)
    return query.order_by(FeatureFlag.flag_name.asc(), FeatureFlag.environment.asc()).all()


def find_flag(flag_name: str, environment: Optional[str] = None) -> Optional[FeatureFlag]:
    """
    Resolve one flag row for `environment`.

    A row scoped to the exact environment wins over the catch-all `all` row.
    """
    query = for_environment(
        FeatureFlag.alive().filter(FeatureFlag.flag_name == flag_name),
        FeatureFlag,
        environment,
    )
    if environment is not None:
        query = query.order_by(
            case((FeatureFlag.environment == environment, 0), else_=1),
            FeatureFlag.created_at.asc(),
        )
    else:
        query = query.order_by(FeatureFlag.created_at.asc())
    return query.first()


def get_feature_flag(*, flag_name: str, environment: Optional[str] = None) -> FeatureFlag:
    flag = find_flag(flag_name, environment)
    if not flag:
        raise NotFoundError("Feature flag not found")
    return flag


def create_feature_flag(*, data: Dict[str, Any]) -> FeatureFlag:
    existing = (
        FeatureFlag.alive()
        .filter_by(flag_name=data["flag_name"], environment=data["environment"])
        .first()
    )
    if existing:
        raise ConflictError("Feature flag already exists for this environment")

    flag = FeatureFlag()
    apply_changes(flag, data, fields=FLAG_FIELDS)

    with transactional(conflict="Feature flag already exists for this environment"):
        db.session.add(flag)
    return flag


def update_feature_flag(*, flag_id: str, data: Dict[str, Any]) -> FeatureFlag:
    flag = FeatureFlag.alive().filter_by(id=flag_id).first()
    if not flag:
        raise NotFoundError("Feature flag not found")

    with transactional(conflict="Feature flag already exists for this environment"):
        apply_changes(flag, data, fields=FLAG_FIELDS)
    return flag


def toggle_feature_flag(
    *,
    flag_name: str,
    is_enabled: bool,
    environment: Optional[str] = None,
) -> FeatureFlag:
    """
    Flip exactly one flag row. Rows of other environments are never touched,
    and the `all` row is only changed when no exact row exists.
    """
    flag = get_feature_flag(flag_name=flag_name, environment=environment)

    with transactional():
        flag.is_enabled = is_enabled

    current_app.logger.info(
        "Feature flag %s (%s) set to %s", flag.flag_name, flag.environment, is_enabled
    )
    return flag
