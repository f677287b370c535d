"""Same-origin proxy for the auth service.

Browsers only keep session cookies set by the site's own origin, so every
``/api/auth/*`` call is forwarded upstream and the upstream ``Set-Cookie``
headers are replayed on the site's response.
"""

import httpx
from flask import Blueprint, Response, current_app, jsonify, request

auth_proxy_bp = Blueprint("auth_proxy", __name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

# Hop-by-hop and framing headers are recomputed by the WSGI server
EXCLUDED_RESPONSE_HEADERS = {
    "content-encoding",
    "content-length",
    "transfer-encoding",
    "connection",
    "set-cookie",
}


def _forward_headers():
    headers = {"Content-Type": request.headers.get("Content-Type", "application/json")}
    cookie = request.headers.get("Cookie")
    if cookie:
        headers["Cookie"] = cookie
    return headers


@auth_proxy_bp.route("/api/auth/<path:path>", methods=PROXY_METHODS)
async def proxy_auth(path):
    upstream = f"{current_app.config['AUTH_SERVICE_URL'].rstrip('/')}/api/auth/{path}"
    body = request.get_data() if request.method not in ("GET", "HEAD") else None

    try:
        async with httpx.AsyncClient(timeout=current_app.config["HTTP_TIMEOUT"]) as http:
            upstream_response = await http.request(
                request.method,
                upstream,
                params=request.args,
                content=body,
                headers=_forward_headers(),
            )
    except httpx.HTTPError as exc:
        current_app.logger.error("Auth proxy to %s failed: %s", upstream, exc)
        return jsonify({"error": "BadGateway", "message": "Auth service unavailable"}), 502

    response = Response(upstream_response.content, status=upstream_response.status_code)
    for name, value in upstream_response.headers.items():
        if name.lower() not in EXCLUDED_RESPONSE_HEADERS:
            response.headers[name] = value
    for cookie in upstream_response.headers.get_list("set-cookie"):
        response.headers.add("Set-Cookie", cookie)
    return response
