from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin
from .enums import Environment


class FeatureFlag(BaseModel, SoftDeleteMixin):
    __tablename__ = "feature_flags"

    flag_name = db.Column(db.String(100), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    is_enabled = db.Column(db.Boolean, nullable=False, default=False)
    environment = db.Column(db.String(20), nullable=False, default=Environment.ALL.value)

    __table_args__ = (
        alive_unique("uq_feature_flags_name_env_alive", "flag_name", "environment"),
    )
