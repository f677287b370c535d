from flask import jsonify

from sitekit.application.geo.hreflang import hreflang_links
from sitekit.application.geo.settings import (
    create_geo_setting,
    find_geo_setting_by_locale,
    list_geo_settings,
    update_geo_setting,
)
from sitekit.normalizers.geo import normalize_geo_setting
from sitekit.schemas import parse_body
from sitekit.schemas.geo import GeoSettingCreate, GeoSettingUpdate
from sitekit.utils.decorators import roles_required, session_required
from . import v1_bp


@v1_bp.route("/geo/settings", methods=["GET"])
def list_geo_settings_route():
    return jsonify([normalize_geo_setting(s) for s in list_geo_settings()])


@v1_bp.route("/geo/settings/<locale>", methods=["GET"])
def get_geo_setting(locale):
    return jsonify(normalize_geo_setting(find_geo_setting_by_locale(locale=locale)))


@v1_bp.route("/geo/settings", methods=["POST"])
@session_required
@roles_required("admin")
def create_geo_setting_route():
    payload = parse_body(GeoSettingCreate)
    setting = create_geo_setting(data=payload.changes())
    return jsonify(normalize_geo_setting(setting)), 201


@v1_bp.route("/geo/settings/<uuid:setting_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_geo_setting_route(setting_id):
    payload = parse_body(GeoSettingUpdate)
    setting = update_geo_setting(setting_id=str(setting_id), data=payload.changes())
    return jsonify(normalize_geo_setting(setting))


@v1_bp.route("/geo/hreflang/<uuid:content_id>", methods=["GET"])
def get_hreflang(content_id):
    return jsonify(hreflang_links(content_id=str(content_id)))
