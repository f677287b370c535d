# sitekit/normalizers/analytics.py
from __future__ import annotations

from typing import Any, Dict

from sitekit.models.analytics_config import AnalyticsConfig
from sitekit.models.custom_script import CustomScript
from sitekit.models.feature_flag import FeatureFlag
from sitekit.models.site_verification import SiteVerification
from . import iso


def normalize_analytics_config(config: AnalyticsConfig) -> Dict[str, Any]:
    return {
        "id": config.id,
        "platform": config.platform,
        "name": config.name,
        "tracking_id": config.tracking_id,
        "is_active": config.is_active,
        "environment": config.environment,
        "additional_config": config.additional_config,
        "priority": config.priority,
        "created_by_user_id": config.created_by_user_id,
        "created_at": iso(config.created_at),
        "updated_at": iso(config.updated_at),
    }


def normalize_site_verification(verification: SiteVerification) -> Dict[str, Any]:
    return {
        "id": verification.id,
        "platform": verification.platform,
        "verification_code": verification.verification_code,
        "meta_tag": verification.meta_tag,
        "is_verified": verification.is_verified,
        "verified_at": iso(verification.verified_at),
        "last_checked": iso(verification.last_checked),
    }


def normalize_custom_script(script: CustomScript) -> Dict[str, Any]:
    """
    Custom scripts are public: the site renderer pulls them unauthenticated,
    so the author id stays out of the payload.
    """
    return {
        "id": script.id,
        "name": script.name,
        "script_content": script.script_content,
        "position": script.position,
        "target_pages": script.target_pages,
        "content_types": script.content_types,
        "priority": script.priority,
        "is_active": script.is_active,
        "environment": script.environment,
    }


def normalize_feature_flag(flag: FeatureFlag) -> Dict[str, Any]:
    return {
        "id": flag.id,
        "flag_name": flag.flag_name,
        "description": flag.description,
        "is_enabled": flag.is_enabled,
        "environment": flag.environment,
    }
