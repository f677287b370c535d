from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin
from .content import content_tags


class Tag(BaseModel, SoftDeleteMixin):
    __tablename__ = "tags"

    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=True)

    contents = db.relationship("Content", secondary=content_tags, back_populates="tags")

    __table_args__ = (
        alive_unique("uq_tags_name_alive", "name"),
        alive_unique("uq_tags_slug_alive", "slug"),
    )
