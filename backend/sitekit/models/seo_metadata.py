from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin


class SeoMetadata(BaseModel, SoftDeleteMixin):
    __tablename__ = "seo_metadata"

    content_id = db.Column(
        db.String(36),
        db.ForeignKey("contents.id", ondelete="CASCADE"),
        nullable=True,
    )

    # Basic meta
    meta_title = db.Column(db.String(255), nullable=True)
    meta_description = db.Column(db.Text, nullable=True)
    meta_keywords = db.Column(db.String(500), nullable=True)

    # Open Graph
    og_title = db.Column(db.String(255), nullable=True)
    og_description = db.Column(db.Text, nullable=True)
    og_image = db.Column(db.String(500), nullable=True)
    og_type = db.Column(db.String(50), nullable=True)
    og_url = db.Column(db.String(255), nullable=True)
    og_site_name = db.Column(db.String(100), nullable=True)

    # Twitter card
    twitter_card = db.Column(db.String(50), nullable=True)
    twitter_site = db.Column(db.String(100), nullable=True)
    twitter_creator = db.Column(db.String(100), nullable=True)
    twitter_image = db.Column(db.String(500), nullable=True)

    canonical_url = db.Column(db.String(500), nullable=True)
    hreflang = db.Column(db.JSON, nullable=True)  # [{"locale": ..., "url": ...}]
    custom_meta = db.Column(db.JSON, nullable=True)  # [{"name": ..., "content": ...}]

    content = db.relationship("Content")

    __table_args__ = (
        alive_unique("uq_seo_metadata_content_alive", "content_id"),
    )
