from functools import wraps
from flask import current_app, g, jsonify, request
from flask_jwt_extended import get_jwt, verify_jwt_in_request
from sitekit.services.auth_client import AuthServiceClient


def _user_from_jwt():
    """Bearer tokens issued for automation and service accounts."""
    verify_jwt_in_request(optional=True)
    claims = get_jwt()
    if not claims or not claims.get("sub"):
        return None
    return {
        "id": claims["sub"],
        "email": claims.get("email"),
        "role": claims.get("role", "user"),
    }


def _user_from_session_cookie():
    cookie_name = current_app.config["SESSION_COOKIE_NAME"]
    if cookie_name not in request.cookies:
        return None

    client = current_app.extensions.get("auth_client")
    if client is None:
        client = AuthServiceClient(
            current_app.config["AUTH_SERVICE_URL"],
            timeout=current_app.config["HTTP_TIMEOUT"],
        )
    payload = client.get_session(request.headers.get("Cookie", ""))
    if not payload:
        return None

    user = payload["user"]
    return {
        "id": user.get("id"),
        "email": user.get("email"),
        "role": user.get("role") or "user",
    }


def session_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        user = _user_from_jwt() or _user_from_session_cookie()
        if not user or not user.get("id"):
            return jsonify({"error": "Unauthorized", "message": "Authentication required"}), 401

        g.current_user = user
        return fn(*args, **kwargs)
    return wrapper

def roles_required(*allowed_roles):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            user = getattr(g, "current_user", None)

            if not user or user.get("role") not in allowed_roles:
                return jsonify({"error": "Forbidden", "message": "Insufficient permissions"}), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
