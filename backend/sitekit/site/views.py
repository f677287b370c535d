# sitekit/site/views.py
import asyncio

import httpx
from flask import Blueprint, Response, abort, current_app, render_template, request

from sitekit.rendering.composition import compose_analytics, verification_meta_tags
from sitekit.rendering.config_loader import load_runtime_config
from sitekit.rendering.metadata import build_content_metadata
from sitekit.rendering.script_injector import PageDocument, inject_all
from .backend_client import BackendClient

site_bp = Blueprint("site", __name__)

CONTENT_TYPES = "any(blog, page, docs, changelog)"
CACHE_CONTROL = "public, max-age=3600"

EMPTY_SITEMAP = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
    "</urlset>\n"
)


def http_client():
    return httpx.AsyncClient(timeout=current_app.config["HTTP_TIMEOUT"])


def backend(http):
    return BackendClient(http, current_app.config["BACKEND_URL"])


async def page_context(http, *, locale):
    """Runtime config, analytics plan, verification tags, scripts and menus."""
    config = current_app.config
    client = backend(http)

    runtime, header_menus, footer_menus = await asyncio.gather(
        load_runtime_config(
            http,
            backend_url=config["BACKEND_URL"],
            environment=config["SITE_ENVIRONMENT"],
        ),
        client.get_navigation("header", locale),
        client.get_navigation("footer", locale),
    )

    document = PageDocument()
    inject_all(document, runtime.custom_scripts, path=request.path)

    return {
        "locale": locale or config["DEFAULT_LOCALE"],
        "site_name": config["SITE_NAME"],
        "analytics": compose_analytics(runtime),
        "verification": verification_meta_tags(runtime.verification),
        "document": document,
        "header_menus": header_menus,
        "footer_menus": footer_menus,
    }


@site_bp.route("/", defaults={"locale": None})
@site_bp.route("/<locale:locale>/")
async def home(locale):
    async with http_client() as http:
        context, posts = await asyncio.gather(
            page_context(http, locale=locale),
            backend(http).list_recent_posts(limit=current_app.config["RECENT_POSTS_LIMIT"]),
        )

    return render_template("site/home.html", posts=posts, **context)


@site_bp.route(f"/<{CONTENT_TYPES}:content_type>/<slug>", defaults={"locale": None})
@site_bp.route(f"/<locale:locale>/<{CONTENT_TYPES}:content_type>/<slug>")
async def content_page(content_type, slug, locale):
    async with http_client() as http:
        client = backend(http)
        content = await client.get_content_by_slug(slug)

        if not content or content.get("type") != content_type:
            abort(404)

        context, seo, hreflang, json_ld = await asyncio.gather(
            page_context(http, locale=locale),
            client.get_seo_metadata(content["id"]),
            client.get_hreflang(content["id"]),
            client.get_structured_data(content["id"]),
        )

    metadata = build_content_metadata(
        content,
        seo=seo,
        hreflang=hreflang,
        verification=context["verification"],
        site_url=current_app.config["SITE_URL"],
        locale=locale,
        site_name=current_app.config["SITE_NAME"],
    )

    return render_template(
        "site/content.html",
        content=content,
        metadata=metadata,
        json_ld=json_ld,
        **context,
    )


@site_bp.route("/sitemap.xml")
async def sitemap():
    async with http_client() as http:
        xml = await backend(http).fetch_document("/seo/sitemap.xml")

    response = Response(xml or EMPTY_SITEMAP, mimetype="application/xml")
    response.headers["Cache-Control"] = CACHE_CONTROL
    return response


@site_bp.route("/robots.txt")
async def robots():
    async with http_client() as http:
        text = await backend(http).fetch_document("/seo/robots.txt")

    if text is None:
        site_url = current_app.config["SITE_URL"].rstrip("/")
        text = (
            "User-agent: *\n"
            "Allow: /\n"
            "Disallow: /dashboard\n"
            "\n"
            f"Sitemap: {site_url}/sitemap.xml\n"
        )

    response = Response(text, mimetype="text/plain")
    response.headers["Cache-Control"] = CACHE_CONTROL
    return response
