from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin


class SiteVerification(BaseModel, SoftDeleteMixin):
    __tablename__ = "site_verification"

    platform = db.Column(db.String(20), nullable=False)  # GOOGLE, BING, YANDEX, FACEBOOK, PINTEREST
    verification_code = db.Column(db.String(255), nullable=False)
    meta_tag = db.Column(db.Text, nullable=True)
    is_verified = db.Column(db.Boolean, nullable=False, default=False)
    verified_at = db.Column(db.DateTime(timezone=True), nullable=True)
    last_checked = db.Column(db.DateTime(timezone=True), nullable=True)

    __table_args__ = (
        alive_unique("uq_site_verification_platform_alive", "platform"),
    )
