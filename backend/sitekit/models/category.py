from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin


class Category(BaseModel, SoftDeleteMixin):
    __tablename__ = "categories"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    parent_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    parent = db.relationship("Category", remote_side="Category.id", back_populates="children")
    children = db.relationship("Category", back_populates="parent")
    contents = db.relationship("Content", back_populates="category")

    __table_args__ = (
        alive_unique("uq_categories_slug_alive", "slug"),
    )
