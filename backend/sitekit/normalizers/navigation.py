def normalize_navigation_menu(menu):
    return {
        "id": menu.id,
        "name": menu.name,
        "location": menu.location,
        "items": menu.items or [],
        "locale": menu.locale,
        "is_active": menu.is_active,
        "order": menu.order,
    }
