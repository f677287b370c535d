from flask import current_app, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from sitekit.extensions import db
from . import v1_bp


@v1_bp.route('/health', methods=['GET'])
def health_check():
    try:
        db.session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as exc:
        current_app.logger.error("Health check could not reach the database: %s", exc)
        database = "unavailable"

    status = "ok" if database == "ok" else "degraded"
    return jsonify({
        "status": status,
        "service": "sitekit-cms",
        "database": database,
        "media_storage": "s3" if current_app.extensions["media_storage"].primary else "local",
    }), 200 if status == "ok" else 503
