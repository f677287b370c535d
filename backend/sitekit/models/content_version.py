from sqlalchemy import event
from sitekit.extensions import db
from .base import BaseModel


class ContentVersion(BaseModel):
    __tablename__ = "content_versions"

    content_id = db.Column(
        db.String(36),
        db.ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    version = db.Column(db.Integer, nullable=False)

    title = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, nullable=False)
    excerpt = db.Column(db.String(500), nullable=True)
    meta = db.Column("metadata", db.JSON, nullable=False, default=dict)  # status, type, category, tags

    change_note = db.Column(db.Text, nullable=True)
    created_by = db.Column(db.String(36), nullable=True)

    content = db.relationship("Content", back_populates="versions")

    __table_args__ = (
        db.UniqueConstraint("content_id", "version", name="uq_content_version"),
    )


@event.listens_for(ContentVersion, "before_update")
def prevent_version_mutation(mapper, connection, target):
    raise RuntimeError("Content versions are immutable")
