from sitekit.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin
from .enums import Environment, ScriptPosition


class CustomScript(BaseModel, SoftDeleteMixin):
    __tablename__ = "custom_scripts"

    name = db.Column(db.String(255), nullable=False)
    script_content = db.Column(db.Text, nullable=False)
    position = db.Column(db.String(20), nullable=False, default=ScriptPosition.HEAD_END.value)
    target_pages = db.Column(db.JSON, nullable=True)  # {"type": "all" | "specific", "paths": [...]}
    content_types = db.Column(db.JSON, nullable=True)
    priority = db.Column(db.Integer, nullable=False, default=0)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    environment = db.Column(db.String(20), nullable=False, default=Environment.ALL.value)
    created_by_user_id = db.Column(db.String(36), nullable=True, index=True)
