from flask import current_app, g, jsonify, request
from werkzeug.exceptions import BadRequest

from sitekit.application.media.query_media import delete_media, get_media, list_media
from sitekit.application.media.upload_media import upload_media
from sitekit.normalizers.media import normalize_media
from sitekit.normalizers.pagination import normalize_pagination
from sitekit.schemas.media import MediaMetadata
from sitekit.utils.decorators import roles_required, session_required
from sitekit.utils.media import ALLOWED_EXTENSIONS, allowed_file
from sitekit.utils.pagination import parse_offset_params
from . import v1_bp


@v1_bp.route("/media", methods=["GET"])
def list_media_route():
    items, meta = list_media(params=parse_offset_params(request))
    return jsonify(normalize_pagination(items, normalize_media, meta))


@v1_bp.route("/media/<uuid:media_id>", methods=["GET"])
def get_media_route(media_id):
    return jsonify(normalize_media(get_media(media_id=str(media_id))))


@v1_bp.route("/media/upload", methods=["POST"])
@session_required
@roles_required("admin")
def upload_media_route():
    file = request.files.get("file")
    if not file or not file.filename:
        raise BadRequest("A file is required")

    if not allowed_file(file.filename):
        allowed = ", ".join(sorted(ALLOWED_EXTENSIONS))
        raise BadRequest(f"File type not allowed. Allowed: {allowed}")

    metadata = MediaMetadata.model_validate({
        key: request.form[key]
        for key in ("alt_text", "caption", "title")
        if request.form.get(key)
    })

    media = upload_media(
        backends=current_app.extensions["media_storage"],
        stream=file.stream,
        original_name=file.filename,
        mime_type=file.mimetype,
        actor_id=g.current_user["id"],
        metadata=metadata.changes(),
    )
    return jsonify(normalize_media(media, admin=True)), 201


@v1_bp.route("/media/<uuid:media_id>", methods=["DELETE"])
@session_required
@roles_required("admin")
def delete_media_route(media_id):
    delete_media(media_id=str(media_id))
    return "", 204
