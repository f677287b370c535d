from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin


class GeoSetting(BaseModel, SoftDeleteMixin):
    __tablename__ = "geo_settings"

    country_code = db.Column(db.String(10), nullable=False)
    language_code = db.Column(db.String(10), nullable=False, index=True)
    region = db.Column(db.String(50), nullable=True)
    timezone = db.Column(db.String(50), nullable=True)
    currency = db.Column(db.String(10), nullable=True)
    hreflang_config = db.Column(db.JSON, nullable=True)  # {"enabled": bool, "default_locale": ..., "alternate_locales": [...]}
    regional_schema_overrides = db.Column(db.JSON, nullable=True)
    regional_analytics_overrides = db.Column(db.JSON, nullable=True)

    __table_args__ = (
        alive_unique("uq_geo_settings_country_alive", "country_code"),
    )

    @property
    def locale(self):
        if self.country_code.lower() == self.language_code.lower():
            return self.language_code
        return f"{self.language_code}-{self.country_code}"
