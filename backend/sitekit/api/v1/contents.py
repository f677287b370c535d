# sitekit/api/v1/contents.py
from flask import g, jsonify, request

from sitekit.application.content.create_content import create_content
from sitekit.application.content.delete_content import delete_content
from sitekit.application.content.publish_content import publish_content, unpublish_content
from sitekit.application.content.query_content import (
    find_content_by_slug,
    get_content,
    list_contents,
    list_versions,
)
from sitekit.application.content.update_content import update_content
from sitekit.models.enums import ContentStatus, ContentType
from sitekit.normalizers.content import normalize_content, normalize_content_version
from sitekit.normalizers.pagination import normalize_pagination
from sitekit.schemas import parse_body
from sitekit.schemas.content import ContentCreate, ContentUpdate
from sitekit.utils.decorators import roles_required, session_required
from sitekit.utils.optimistic_lock import enforce_optimistic_lock
from sitekit.utils.pagination import parse_offset_params
from sitekit.utils.params import query_bool, query_enum
from . import v1_bp


@v1_bp.route("/contents", methods=["GET"])
def list_contents_route():
    content_type = query_enum(request.args, "type", ContentType)
    status = query_enum(request.args, "status", ContentStatus)

    filters = {
        "type": content_type.value if content_type else None,
        "status": status.value if status else None,
        "category_id": request.args.get("categoryId"),
        "author_id": request.args.get("authorId"),
        "tag_slug": request.args.get("tagSlug"),
        "search": (request.args.get("search") or "").strip() or None,
    }

    items, meta = list_contents(filters=filters, params=parse_offset_params(request))
    return jsonify(normalize_pagination(
        items,
        lambda c: normalize_content(c, include_body=False),
        meta,
    ))


@v1_bp.route("/contents/slug/<slug>", methods=["GET"])
def get_content_by_slug(slug):
    include_drafts = query_bool(request.args, "includeDrafts")
    content = find_content_by_slug(slug=slug, include_drafts=include_drafts)
    return jsonify(normalize_content(content))


@v1_bp.route("/contents/<uuid:content_id>", methods=["GET"])
def get_content_by_id(content_id):
    content = get_content(content_id=str(content_id))
    return jsonify(normalize_content(content))


@v1_bp.route("/contents", methods=["POST"])
@session_required
@roles_required("admin")
def create_content_route():
    payload = parse_body(ContentCreate)
    content = create_content(author_id=g.current_user["id"], data=payload.changes())
    return jsonify(normalize_content(content)), 201


@v1_bp.route("/contents/<uuid:content_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_content_route(content_id):
    content = get_content(content_id=str(content_id))

    # -----------------------
    # Optimistic Locking Check
    # -----------------------
    enforce_optimistic_lock(content)

    payload = parse_body(ContentUpdate)
    content = update_content(
        content_id=content.id,
        actor_id=g.current_user["id"],
        data=payload.changes(),
    )
    return jsonify(normalize_content(content))


@v1_bp.route("/contents/<uuid:content_id>/publish", methods=["POST"])
@session_required
@roles_required("admin")
def publish_content_route(content_id):
    content = publish_content(content_id=str(content_id))
    return jsonify(normalize_content(content))


@v1_bp.route("/contents/<uuid:content_id>/unpublish", methods=["POST"])
@session_required
@roles_required("admin")
def unpublish_content_route(content_id):
    content = unpublish_content(content_id=str(content_id))
    return jsonify(normalize_content(content))


@v1_bp.route("/contents/<uuid:content_id>", methods=["DELETE"])
@session_required
@roles_required("admin")
def delete_content_route(content_id):
    delete_content(content_id=str(content_id), actor_id=g.current_user["id"])
    return "", 204


@v1_bp.route("/contents/<uuid:content_id>/versions", methods=["GET"])
@session_required
@roles_required("admin")
def list_content_versions(content_id):
    versions = list_versions(content_id=str(content_id))
    return jsonify([normalize_content_version(v) for v in versions])
