from flask import jsonify, request

from sitekit.application.navigation.menus import create_menu, delete_menu, list_menus, update_menu
from sitekit.models.enums import MenuLocation
from sitekit.normalizers.navigation import normalize_navigation_menu
from sitekit.schemas import parse_body
from sitekit.schemas.navigation import NavigationMenuCreate, NavigationMenuUpdate
from sitekit.utils.decorators import roles_required, session_required
from sitekit.utils.params import query_enum
from . import v1_bp


@v1_bp.route("/navigation", methods=["GET"])
def list_navigation():
    location = query_enum(request.args, "location", MenuLocation)
    menus = list_menus(
        location=location.value if location else None,
        locale=request.args.get("locale") or None,
    )
    return jsonify([normalize_navigation_menu(m) for m in menus])


@v1_bp.route("/navigation", methods=["POST"])
@session_required
@roles_required("admin")
def create_navigation():
    payload = parse_body(NavigationMenuCreate)
    menu = create_menu(data=payload.model_dump())
    return jsonify(normalize_navigation_menu(menu)), 201


@v1_bp.route("/navigation/<uuid:menu_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_navigation(menu_id):
    payload = parse_body(NavigationMenuUpdate)
    menu = update_menu(menu_id=str(menu_id), data=payload.changes())
    return jsonify(normalize_navigation_menu(menu))


@v1_bp.route("/navigation/<uuid:menu_id>", methods=["DELETE"])
@session_required
@roles_required("admin")
def delete_navigation(menu_id):
    delete_menu(menu_id=str(menu_id))
    return "", 204
