from sitekit.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin
from .enums import StorageType


class Media(BaseModel, SoftDeleteMixin):
    __tablename__ = "media"

    filename = db.Column(db.String(255), nullable=False)
    url = db.Column(db.String(500), nullable=False)
    storage_type = db.Column(db.String(10), nullable=False, default=StorageType.LOCAL.value)
    storage_path = db.Column(db.String(500), nullable=True)
    mime_type = db.Column(db.String(100), nullable=True)
    file_size = db.Column(db.BigInteger, nullable=True)
    width = db.Column(db.Integer, nullable=True)
    height = db.Column(db.Integer, nullable=True)
    alt_text = db.Column(db.String(500), nullable=True)
    caption = db.Column(db.Text, nullable=True)
    title = db.Column(db.String(500), nullable=True)
    meta = db.Column("metadata", db.JSON, nullable=True)
    uploaded_by_user_id = db.Column(db.String(36), nullable=False, index=True)
