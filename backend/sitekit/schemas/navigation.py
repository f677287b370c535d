from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from sitekit.models.enums import MenuLocation
from .common import RequestModel


class MenuLink(BaseModel):
    label: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    target: Optional[Literal["_blank", "_self"]] = None


class MenuItem(MenuLink):
    children: Optional[List[MenuLink]] = None


class NavigationMenuCreate(RequestModel):
    name: str = Field(..., min_length=1, max_length=100)
    location: MenuLocation
    items: List[MenuItem] = Field(default_factory=list)
    locale: Optional[str] = Field(None, max_length=10)
    is_active: bool = True
    order: int = 0


class NavigationMenuUpdate(RequestModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    location: Optional[MenuLocation] = None
    items: Optional[List[MenuItem]] = None
    locale: Optional[str] = Field(None, max_length=10)
    is_active: Optional[bool] = None
    order: Optional[int] = None
