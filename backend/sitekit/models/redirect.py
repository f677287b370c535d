from sitekit.extensions import db
from .base import BaseModel, alive_unique
from .soft_delete_mixin import SoftDeleteMixin
from .enums import RedirectType


class Redirect(BaseModel, SoftDeleteMixin):
    __tablename__ = "content_redirects"

    from_path = db.Column(db.String(500), nullable=False)
    to_path = db.Column(db.String(500), nullable=False)
    type = db.Column(db.Integer, nullable=False, default=RedirectType.PERMANENT.value)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    __table_args__ = (
        alive_unique("uq_content_redirects_from_alive", "from_path"),
    )
