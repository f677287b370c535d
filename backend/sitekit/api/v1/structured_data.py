from flask import jsonify

from sitekit.application.structured_data.generate import generate_for_content
from sitekit.application.structured_data.schemas import (
    create_schema,
    create_template,
    list_templates,
    update_template,
)
from sitekit.normalizers.structured_data import normalize_json_ld_schema, normalize_template
from sitekit.schemas import parse_body
from sitekit.schemas.structured_data import JsonLdSchemaCreate, TemplateCreate, TemplateUpdate
from sitekit.utils.decorators import roles_required, session_required
from . import v1_bp


@v1_bp.route("/structured-data/generate/<uuid:content_id>", methods=["GET"])
def generate_structured_data(content_id):
    return jsonify(generate_for_content(content_id=str(content_id)))


@v1_bp.route("/structured-data/schemas", methods=["POST"])
@session_required
@roles_required("admin")
def create_json_ld_schema():
    payload = parse_body(JsonLdSchemaCreate)
    schema = create_schema(data=payload.model_dump())
    return jsonify(normalize_json_ld_schema(schema)), 201


@v1_bp.route("/structured-data/templates", methods=["GET"])
def list_structured_data_templates():
    return jsonify([normalize_template(t) for t in list_templates()])


@v1_bp.route("/structured-data/templates", methods=["POST"])
@session_required
@roles_required("admin")
def create_structured_data_template():
    payload = parse_body(TemplateCreate)
    template = create_template(data=payload.model_dump())
    return jsonify(normalize_template(template)), 201


@v1_bp.route("/structured-data/templates/<uuid:template_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_structured_data_template(template_id):
    payload = parse_body(TemplateUpdate)
    template = update_template(template_id=str(template_id), data=payload.changes())
    return jsonify(normalize_template(template))
