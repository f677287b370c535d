from sitekit.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class JsonLdSchema(BaseModel, SoftDeleteMixin):
    __tablename__ = "json_ld_schemas"

    schema_type = db.Column(db.String(50), nullable=False)
    schema_data = db.Column(db.JSON, nullable=False, default=dict)
    content_id = db.Column(
        db.String(36),
        db.ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    is_global = db.Column(db.Boolean, nullable=False, default=False)
