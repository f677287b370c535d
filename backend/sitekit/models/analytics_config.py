from sitekit.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin
from .enums import Environment


class AnalyticsConfig(BaseModel, SoftDeleteMixin):
    __tablename__ = "analytics_configs"

    platform = db.Column(db.String(30), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    tracking_id = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    environment = db.Column(db.String(20), nullable=False, default=Environment.ALL.value)
    additional_config = db.Column(db.JSON, nullable=True)
    priority = db.Column(db.Integer, nullable=False, default=0)
    created_by_user_id = db.Column(db.String(36), nullable=True, index=True)
