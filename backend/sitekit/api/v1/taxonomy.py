from flask import jsonify, request

from sitekit.application.taxonomy import categories, tags
from sitekit.normalizers.taxonomy import normalize_category, normalize_tag
from sitekit.schemas import parse_body
from sitekit.schemas.taxonomy import CategoryCreate, CategoryUpdate, TagCreate, TagUpdate
from sitekit.utils.decorators import roles_required, session_required
from . import v1_bp

# ------------------------
# Categories
# ------------------------

@v1_bp.route("/categories", methods=["GET"])
def list_categories():
    items = categories.list_categories(parent_id=request.args.get("parentId"))
    return jsonify([normalize_category(c) for c in items])


@v1_bp.route("/categories/<uuid:category_id>", methods=["GET"])
def get_category(category_id):
    category = categories.get_category(category_id=str(category_id))
    return jsonify(normalize_category(category, include_children=True))


@v1_bp.route("/categories", methods=["POST"])
@session_required
@roles_required("admin")
def create_category():
    payload = parse_body(CategoryCreate)
    category = categories.create_category(data=payload.changes())
    return jsonify(normalize_category(category)), 201


@v1_bp.route("/categories/<uuid:category_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_category(category_id):
    payload = parse_body(CategoryUpdate)
    category = categories.update_category(category_id=str(category_id), data=payload.changes())
    return jsonify(normalize_category(category))


@v1_bp.route("/categories/<uuid:category_id>", methods=["DELETE"])
@session_required
@roles_required("admin")
def delete_category(category_id):
    categories.delete_category(category_id=str(category_id))
    return "", 204

# ------------------------
# Tags
# ------------------------

@v1_bp.route("/tags", methods=["GET"])
def list_tags():
    return jsonify([normalize_tag(t) for t in tags.list_tags()])


@v1_bp.route("/tags/<uuid:tag_id>", methods=["GET"])
def get_tag(tag_id):
    return jsonify(normalize_tag(tags.get_tag(tag_id=str(tag_id))))


@v1_bp.route("/tags", methods=["POST"])
@session_required
@roles_required("admin")
def create_tag():
    payload = parse_body(TagCreate)
    tag = tags.create_tag(data=payload.changes())
    return jsonify(normalize_tag(tag)), 201


@v1_bp.route("/tags/<uuid:tag_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_tag(tag_id):
    payload = parse_body(TagUpdate)
    tag = tags.update_tag(tag_id=str(tag_id), data=payload.changes())
    return jsonify(normalize_tag(tag))


@v1_bp.route("/tags/<uuid:tag_id>", methods=["DELETE"])
@session_required
@roles_required("admin")
def delete_tag(tag_id):
    tags.delete_tag(tag_id=str(tag_id))
    return "", 204
