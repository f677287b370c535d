from sitekit.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class StructuredDataTemplate(BaseModel, SoftDeleteMixin):
    __tablename__ = "structured_data_templates"

    schema_type = db.Column(db.String(50), nullable=False)
    template_json = db.Column(db.JSON, nullable=False, default=dict)
    content_type_mapping = db.Column(db.String(100), nullable=True)
    auto_generate = db.Column(db.Boolean, nullable=False, default=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
