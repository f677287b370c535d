# sitekit/api/v1/analytics.py
from flask import g, jsonify, request
from werkzeug.exceptions import BadRequest

from sitekit.application.analytics import configs, custom_scripts, feature_flags, verification
from sitekit.models.enums import Environment, ScriptPosition, VerificationPlatform
from sitekit.normalizers.analytics import (
    normalize_analytics_config,
    normalize_custom_script,
    normalize_feature_flag,
    normalize_site_verification,
)
from sitekit.schemas import parse_body
from sitekit.schemas.analytics import (
    AnalyticsConfigCreate,
    AnalyticsConfigUpdate,
    CustomScriptCreate,
    CustomScriptUpdate,
    FeatureFlagCreate,
    FeatureFlagUpdate,
    SiteVerificationCreate,
    SiteVerificationUpdate,
)
from sitekit.utils.decorators import roles_required, session_required
from sitekit.utils.params import parse_enum, query_bool, query_enum
from . import v1_bp


def _environment():
    environment = query_enum(request.args, "environment", Environment)
    return environment.value if environment else None

# ------------------------
# Analytics configs
# ------------------------

@v1_bp.route("/analytics/configs", methods=["GET"])
def list_analytics_configs():
    items = configs.list_analytics_configs(
        active_only=query_bool(request.args, "activeOnly"),
        environment=_environment(),
    )
    return jsonify([normalize_analytics_config(c) for c in items])


@v1_bp.route("/analytics/configs/<uuid:config_id>", methods=["GET"])
def get_analytics_config(config_id):
    config = configs.get_analytics_config(config_id=str(config_id))
    return jsonify(normalize_analytics_config(config))


@v1_bp.route("/analytics/configs", methods=["POST"])
@session_required
@roles_required("admin")
def create_analytics_config():
    payload = parse_body(AnalyticsConfigCreate)
    config = configs.create_analytics_config(
        actor_id=g.current_user["id"],
        data=payload.model_dump(),
    )
    return jsonify(normalize_analytics_config(config)), 201


@v1_bp.route("/analytics/configs/<uuid:config_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_analytics_config(config_id):
    payload = parse_body(AnalyticsConfigUpdate)
    config = configs.update_analytics_config(config_id=str(config_id), data=payload.changes())
    return jsonify(normalize_analytics_config(config))


@v1_bp.route("/analytics/configs/<uuid:config_id>", methods=["DELETE"])
@session_required
@roles_required("admin")
def delete_analytics_config(config_id):
    configs.delete_analytics_config(config_id=str(config_id))
    return "", 204

# ------------------------
# Site verification
# ------------------------

@v1_bp.route("/analytics/verification", methods=["GET"])
def list_verifications():
    return jsonify([normalize_site_verification(v) for v in verification.list_verifications()])


@v1_bp.route("/analytics/verification/<platform>", methods=["GET"])
def get_verification(platform):
    platform = parse_enum(platform, VerificationPlatform, "platform")
    item = verification.get_verification_by_platform(platform=platform.value)
    return jsonify(normalize_site_verification(item))


@v1_bp.route("/analytics/verification", methods=["POST"])
@session_required
@roles_required("admin")
def upsert_verification():
    payload = parse_body(SiteVerificationCreate)
    item = verification.upsert_verification(data=payload.changes())
    return jsonify(normalize_site_verification(item)), 201


@v1_bp.route("/analytics/verification/<uuid:verification_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_verification(verification_id):
    payload = parse_body(SiteVerificationUpdate)
    item = verification.update_verification(
        verification_id=str(verification_id),
        data=payload.changes(),
    )
    return jsonify(normalize_site_verification(item))


@v1_bp.route("/analytics/verification/<platform>/verify", methods=["POST"])
@session_required
@roles_required("admin")
def verify_site(platform):
    platform = parse_enum(platform, VerificationPlatform, "platform")
    item = verification.mark_verified(platform=platform.value)
    return jsonify(normalize_site_verification(item))

# ------------------------
# Custom scripts
# ------------------------

@v1_bp.route("/analytics/custom-scripts", methods=["GET"])
def list_custom_scripts():
    position = query_enum(request.args, "position", ScriptPosition)
    items = custom_scripts.list_custom_scripts(
        active_only=query_bool(request.args, "activeOnly"),
        position=position.value if position else None,
        environment=_environment(),
    )
    return jsonify([normalize_custom_script(s) for s in items])


@v1_bp.route("/analytics/custom-scripts/<uuid:script_id>", methods=["GET"])
def get_custom_script(script_id):
    script = custom_scripts.get_custom_script(script_id=str(script_id))
    return jsonify(normalize_custom_script(script))


@v1_bp.route("/analytics/custom-scripts", methods=["POST"])
@session_required
@roles_required("admin")
def create_custom_script():
    payload = parse_body(CustomScriptCreate)
    script = custom_scripts.create_custom_script(
        actor_id=g.current_user["id"],
        data=payload.model_dump(),
    )
    return jsonify(normalize_custom_script(script)), 201


@v1_bp.route("/analytics/custom-scripts/<uuid:script_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_custom_script(script_id):
    payload = parse_body(CustomScriptUpdate)
    script = custom_scripts.update_custom_script(script_id=str(script_id), data=payload.changes())
    return jsonify(normalize_custom_script(script))


@v1_bp.route("/analytics/custom-scripts/<uuid:script_id>", methods=["DELETE"])
@session_required
@roles_required("admin")
def delete_custom_script(script_id):
    custom_scripts.delete_custom_script(script_id=str(script_id))
    return "", 204

# ------------------------
# Feature flags
# ------------------------

@v1_bp.route("/analytics/feature-flags", methods=["GET"])
def list_feature_flags():
    items = feature_flags.list_feature_flags(environment=_environment())
    return jsonify([normalize_feature_flag(f) for f in items])


@v1_bp.route("/analytics/feature-flags/<flag_name>", methods=["GET"])
def get_feature_flag(flag_name):
    flag = feature_flags.get_feature_flag(flag_name=flag_name, environment=_environment())
    return jsonify(normalize_feature_flag(flag))


@v1_bp.route("/analytics/feature-flags", methods=["POST"])
@session_required
@roles_required("admin")
def create_feature_flag():
    payload = parse_body(FeatureFlagCreate)
    flag = feature_flags.create_feature_flag(data=payload.model_dump())
    return jsonify(normalize_feature_flag(flag)), 201


@v1_bp.route("/analytics/feature-flags/<uuid:flag_id>", methods=["PATCH"])
@session_required
@roles_required("admin")
def update_feature_flag(flag_id):
    payload = parse_body(FeatureFlagUpdate)
    flag = feature_flags.update_feature_flag(flag_id=str(flag_id), data=payload.changes())
    return jsonify(normalize_feature_flag(flag))


@v1_bp.route("/analytics/feature-flags/<flag_name>/toggle", methods=["PATCH"])
@session_required
@roles_required("admin")
def toggle_feature_flag(flag_name):
    if request.args.get("isEnabled") is None:
        raise BadRequest("'isEnabled' is required")

    flag = feature_flags.toggle_feature_flag(
        flag_name=flag_name,
        is_enabled=query_bool(request.args, "isEnabled"),
        environment=_environment(),
    )
    return jsonify(normalize_feature_flag(flag))
