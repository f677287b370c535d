from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin
from .enums import ContentStatus

content_tags = db.Table(
    "content_tags",
    db.Column("content_id", db.String(36), db.ForeignKey("contents.id", ondelete="CASCADE"), primary_key=True),
    db.Column("tag_id", db.String(36), db.ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Content(BaseModel, SoftDeleteMixin):
    __tablename__ = "contents"

    title = db.Column(db.String(255), nullable=False, index=True)
    slug = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False, index=True)  # blog, page, docs, changelog
    status = db.Column(db.String(20), nullable=False, default=ContentStatus.DRAFT.value, index=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True)
    excerpt = db.Column(db.String(500), nullable=True)
    featured_image = db.Column(db.String(500), nullable=True)
    reading_time = db.Column(db.Integer, nullable=False, default=0)

    author_id = db.Column(db.String(36), nullable=False, index=True)
    category_id = db.Column(
        db.String(36),
        db.ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    category = db.relationship("Category", back_populates="contents")
    tags = db.relationship(
        "Tag",
        secondary=content_tags,
        back_populates="contents",
        lazy="selectin",
    )
    versions = db.relationship(
        "ContentVersion",
        back_populates="content",
        order_by="ContentVersion.version.desc()",
        lazy="dynamic",
    )

    __table_args__ = (
        alive_unique("uq_contents_slug_alive", "slug"),
    )
