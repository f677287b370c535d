from typing import Any, Dict, List


from sitekit.errors import ConflictError, NotFoundError
from sitekit.extensions import db
from sitekit.models.geo_setting import GeoSetting
from sitekit.utils.patch import apply_changes
from sitekit.utils.transaction import transactional

GEO_FIELDS = (
    "country_code",
    "language_code",
    "region",
    "timezone",
    "currency",
    "hreflang_config",
    "regional_schema_overrides",
    "regional_analytics_overrides",
)


def list_geo_settings() -> List[GeoSetting]:
    return (
        GeoSetting.alive()
        .order_by(GeoSetting.country_code.asc(), GeoSetting.language_code.asc())
        .all()
    )


def split_locale(locale: str):
    """`en-US` -> ("en", "US"); a bare `fr` stands for both codes."""
    language_code, _, country_code = locale.partition("-")
    return language_code, country_code or language_code


def find_geo_setting_by_locale(*, locale: str) -> GeoSetting:
    language_code, country_code = split_locale(locale)
    setting = (
        GeoSetting.alive()
        .filter_by(language_code=language_code, country_code=country_code)
        .first()
    )
    if not setting:
        raise NotFoundError("Geo setting not found")
    return setting


def create_geo_setting(*, data: Dict[str, Any]) -> GeoSetting:
    if GeoSetting.alive().filter_by(country_code=data["country_code"]).first():
        raise ConflictError("A geo setting for this country already exists")

    setting = GeoSetting()
    apply_changes(setting, data, fields=GEO_FIELDS)

    with transactional(conflict="A geo setting for this country already exists"):
        db.session.add(setting)
    return setting


def update_geo_setting(*, setting_id: str, data: Dict[str, Any]) -> GeoSetting:
    setting = GeoSetting.alive().filter_by(id=setting_id).first()
    if not setting:
        raise NotFoundError("Geo setting not found")

    with transactional(conflict="A geo setting for this country already exists"):
        apply_changes(setting, data, fields=GEO_FIELDS)
    return setting
