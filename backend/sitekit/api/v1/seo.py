from flask import Response, jsonify, request
from werkzeug.exceptions import BadRequest

from sitekit.application.analytics.verification import list_verifications
from sitekit.application.seo.metadata import get_metadata, upsert_metadata
from sitekit.application.seo.redirects import create_redirect, resolve_redirect
from sitekit.application.seo.sitemap import generate_robots, generate_sitemap
from sitekit.normalizers.analytics import normalize_site_verification
from sitekit.normalizers.seo import normalize_redirect, normalize_seo_metadata
from sitekit.schemas import parse_body
from sitekit.schemas.seo import RedirectCreate, SeoMetadataUpsert
from sitekit.utils.decorators import roles_required, session_required
from . import v1_bp


@v1_bp.route("/seo/metadata/<uuid:content_id>", methods=["GET"])
def get_seo_metadata(content_id):
    metadata = get_metadata(content_id=str(content_id))
    return jsonify(normalize_seo_metadata(metadata))


@v1_bp.route("/seo/metadata", methods=["POST"])
@session_required
@roles_required("admin")
def upsert_seo_metadata():
    payload = parse_body(SeoMetadataUpsert)
    metadata = upsert_metadata(data=payload.changes())
    return jsonify(normalize_seo_metadata(metadata))


@v1_bp.route("/seo/verification", methods=["GET"])
def list_seo_verifications():
    return jsonify([normalize_site_verification(v) for v in list_verifications()])


@v1_bp.route("/seo/sitemap.xml", methods=["GET"])
def sitemap():
    xml = generate_sitemap(locale=request.args.get("locale") or None)
    return Response(xml, mimetype="application/xml")


@v1_bp.route("/seo/robots.txt", methods=["GET"])
def robots():
    return Response(generate_robots(), mimetype="text/plain")


@v1_bp.route("/seo/redirects", methods=["POST"])
@session_required
@roles_required("admin")
def create_redirect_route():
    payload = parse_body(RedirectCreate)
    redirect = create_redirect(data=payload.model_dump())
    return jsonify(normalize_redirect(redirect)), 201


@v1_bp.route("/seo/redirects/resolve", methods=["GET"])
def resolve_redirect_route():
    path = request.args.get("path")
    if not path:
        raise BadRequest("'path' is required")
    return jsonify(normalize_redirect(resolve_redirect(path=path)))
