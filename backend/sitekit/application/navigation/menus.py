from typing import Any, Dict, List, Optional

from sqlalchemy import or_

from sitekit.errors import NotFoundError
from sitekit.extensions import db
from sitekit.models.navigation_menu import NavigationMenu
from sitekit.utils.patch import apply_changes
from sitekit.utils.transaction import transactional

MENU_FIELDS = ("name", "location", "items", "locale", "is_active", "order")


def list_menus(
    *,
    location: Optional[str] = None,
    locale: Optional[str] = None,
) -> List[NavigationMenu]:
    """Active menus; a locale filter also keeps menus without a locale."""
    query = NavigationMenu.alive().filter(NavigationMenu.is_active.is_(True))

    if location:
        query = query.filter(NavigationMenu.location == location)

    if locale:
        query = query.filter(
            or_(NavigationMenu.locale == locale, NavigationMenu.locale.is_(None))
        )

    return query.order_by(NavigationMenu.order.asc(), NavigationMenu.name.asc()).all()


def get_menu(*, menu_id: str) -> NavigationMenu:
    menu = NavigationMenu.alive().filter_by(id=menu_id).first()
    if not menu:
        raise NotFoundError("Navigation menu not found")
    return menu


def create_menu(*, data: Dict[str, Any]) -> NavigationMenu:
    menu = NavigationMenu()
    apply_changes(menu, data, fields=MENU_FIELDS)

    with transactional():
        db.session.add(menu)
    return menu


def update_menu(*, menu_id: str, data: Dict[str, Any]) -> NavigationMenu:
    menu = get_menu(menu_id=menu_id)
    with transactional():
        apply_changes(menu, data, fields=MENU_FIELDS)
    return menu


def delete_menu(*, menu_id: str) -> None:
    menu = get_menu(menu_id=menu_id)
    with transactional():
        menu.soft_delete()
