import httpx
from flask import Flask, redirect, render_template, request

from .auth_proxy import auth_proxy_bp
from .backend_client import BackendClient
from .config import site_config_by_name
from .converters import LocaleConverter
from .views import http_client, site_bp


def create_site_app(config_name: str = "development") -> Flask:
    """Public site: rendered pages, sitemap/robots proxies and the auth proxy."""
    app = Flask(__name__)
    app.config.from_object(site_config_by_name[config_name])
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Must be registered before any rule uses it
    app.url_map.converters["locale"] = LocaleConverter

    app.register_blueprint(site_bp)
    app.register_blueprint(auth_proxy_bp)

    @app.errorhandler(404)
    async def not_found(error):
        # Unmatched paths may have been moved; ask the CMS before giving up
        async with http_client() as http:
            match = await BackendClient(http, app.config["BACKEND_URL"]).resolve_redirect(request.path)

        if match and match.get("is_active", True):
            return redirect(match["to_path"], code=int(match.get("type", 301)))

        return render_template("site/404.html", site_name=app.config["SITE_NAME"]), 404

    @app.errorhandler(httpx.HTTPError)
    def upstream_failed(error):
        app.logger.error("CMS request failed: %s", error)
        return render_template("site/error.html", site_name=app.config["SITE_NAME"]), 502

    return app
