from sitekit.extensions import db
from .base import BaseModel
from .soft_delete_mixin import SoftDeleteMixin


class NavigationMenu(BaseModel, SoftDeleteMixin):
    __tablename__ = "navigation_menus"

    name = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(20), nullable=False, index=True)  # header, footer, sidebar, mobile
    items = db.Column(db.JSON, nullable=False, default=list)
    locale = db.Column(db.String(10), nullable=True, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    order = db.Column(db.Integer, nullable=False, default=0)
