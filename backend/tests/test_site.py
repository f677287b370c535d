import httpx
import pytest
import respx

from sitekit.site import create_site_app

CMS = "http://cms.test/api/v1"
AUTH = "http://auth.test/api/auth"

POST = {
    "id": "c1",
    "title": "Hello world",
    "slug": "hello",
    "type": "blog",
    "body": "<p>Body <strong>HTML</strong></p>",
    "excerpt": "A short intro",
    "published_at": "2026-01-02T10:00:00",
    "reading_time": 1,
}


@pytest.fixture
def site():
    return create_site_app("testing")


@pytest.fixture
def site_client(site):
    return site.test_client()


@pytest.fixture
def upstream():
    with respx.mock(assert_all_called=False) as router:
        yield router


def _fallback(router):
    # Anything not mocked explicitly answers 404
    router.route().respond(404)


def _runtime(router, *, analytics=(), verification=(), flags=(), scripts=()):
    router.get(url__startswith=f"{CMS}/analytics/configs").respond(200, json=list(analytics))
    router.get(url__startswith=f"{CMS}/seo/verification").respond(200, json=list(verification))
    router.get(url__startswith=f"{CMS}/analytics/feature-flags").respond(200, json=list(flags))
    router.get(url__startswith=f"{CMS}/analytics/custom-scripts").respond(200, json=list(scripts))


def _content(router, content=POST):
    router.get(url__startswith=f"{CMS}/contents/slug/{content['slug']}").respond(200, json=content)


def test_content_page_renders_head_and_scripts(site_client, upstream):
    _content(upstream)
    _runtime(
        upstream,
        analytics=[
            {"id": "a1", "platform": "GTM", "tracking_id": "GTM-ABC"},
            {"id": "a2", "platform": "GA4", "tracking_id": "G-123"},
        ],
        verification=[{"id": "v1", "platform": "GOOGLE", "verification_code": "g-code"}],
        scripts=[
            {"id": "s-head", "script_content": "window.headReady=1", "position": "head-end"},
            {"id": "s-docs", "script_content": "docsOnly()", "position": "body-end",
             "target_pages": {"type": "specific", "paths": ["/docs"]}},
        ],
    )
    upstream.get(url__startswith=f"{CMS}/seo/metadata/c1").respond(
        200, json={"meta_title": "Hello | Example", "meta_keywords": "python,cms"}
    )
    upstream.get(url__startswith=f"{CMS}/geo/hreflang/c1").respond(
        200, json=[{"locale": "fr-FR", "url": "https://example.com/fr-FR/blog/hello"}]
    )
    upstream.get(url__startswith=f"{CMS}/structured-data/generate/c1").respond(
        200, json=[{"@context": "https://schema.org", "@type": "BlogPosting", "headline": "Hello world"}]
    )
    _fallback(upstream)

    response = site_client.get("/blog/hello")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert "<title>Hello | Example</title>" in html
    assert '<meta name="google-site-verification" content="g-code">' in html
    assert '<meta name="keywords" content="python, cms">' in html
    assert '<link rel="canonical" href="https://example.com/blog/hello">' in html
    assert '<link rel="alternate" hreflang="fr-FR" href="https://example.com/fr-FR/blog/hello">' in html
    assert "googletagmanager.com/gtm.js" in html
    assert 'data-nested-in="gtm"' in html
    assert "application/ld+json" in html and "BlogPosting" in html
    assert '<script data-script-id="s-head">window.headReady=1</script>' in html
    assert "docsOnly()" not in html
    assert "<p>Body <strong>HTML</strong></p>" in html


def test_runtime_config_requests_carry_environment(site_client, upstream):
    _content(upstream)
    _runtime(upstream)
    _fallback(upstream)

    site_client.get("/blog/hello")

    calls = [call.request.url for call in upstream.calls if "/analytics/" in call.request.url.path]
    assert calls
    assert all(url.params["environment"] == "production" for url in calls)


def test_disabled_analytics_flag_hides_tags(site_client, upstream):
    _content(upstream)
    _runtime(
        upstream,
        analytics=[{"id": "a1", "platform": "GTM", "tracking_id": "GTM-ABC"}],
        flags=[{"id": "f1", "flag_name": "ENABLE_ANALYTICS", "is_enabled": False}],
    )
    _fallback(upstream)

    html = site_client.get("/blog/hello").get_data(as_text=True)
    assert "googletagmanager" not in html


def test_production_flag_row_overrides_all_row(site_client, upstream):
    _content(upstream)
    _runtime(
        upstream,
        analytics=[{"id": "a1", "platform": "GA4", "tracking_id": "G-123"}],
        flags=[
            {"id": "f-all", "flag_name": "ENABLE_ANALYTICS", "is_enabled": True, "environment": "all"},
            {"id": "f-prod", "flag_name": "ENABLE_ANALYTICS", "is_enabled": False, "environment": "production"},
        ],
    )
    _fallback(upstream)

    html = site_client.get("/blog/hello").get_data(as_text=True)
    assert "googletagmanager" not in html


def test_runtime_config_outage_still_renders(site_client, upstream):
    _content(upstream)
    upstream.get(url__startswith=f"{CMS}/analytics/").mock(side_effect=httpx.ConnectError("down"))
    upstream.get(url__startswith=f"{CMS}/seo/verification").respond(503)
    _fallback(upstream)

    response = site_client.get("/blog/hello")

    assert response.status_code == 200
    assert "<title>Hello world</title>" in response.get_data(as_text=True)


def test_localized_page_uses_locale_prefix(site_client, upstream):
    _content(upstream)
    _runtime(upstream)
    _fallback(upstream)

    html = site_client.get("/fr/blog/hello").get_data(as_text=True)

    assert '<html lang="fr"' in html
    assert '<link rel="canonical" href="https://example.com/fr/blog/hello">' in html


def test_type_mismatch_is_not_found(site_client, upstream):
    _content(upstream)
    _fallback(upstream)

    response = site_client.get("/docs/hello")
    assert response.status_code == 404
    assert "Page not found" in response.get_data(as_text=True)


def test_unknown_path_follows_redirect(site_client, upstream):
    route = upstream.get(url__startswith=f"{CMS}/seo/redirects/resolve").respond(
        200, json={"from_path": "/old-post", "to_path": "/blog/hello", "type": 301, "is_active": True}
    )
    _fallback(upstream)

    response = site_client.get("/old-post")

    assert response.status_code == 301
    assert response.headers["Location"] == "/blog/hello"
    assert route.calls.last.request.url.params["path"] == "/old-post"


def test_temporary_redirect(site_client, upstream):
    upstream.get(url__startswith=f"{CMS}/seo/redirects/resolve").respond(
        200, json={"from_path": "/promo", "to_path": "/blog/hello", "type": 302, "is_active": True}
    )
    _fallback(upstream)

    assert site_client.get("/promo").status_code == 302


def test_upstream_failure_renders_error_page(site_client, upstream):
    upstream.get(url__startswith=f"{CMS}/contents/slug/hello").respond(500)
    _fallback(upstream)

    response = site_client.get("/blog/hello")
    assert response.status_code == 502
    assert "Temporarily unavailable" in response.get_data(as_text=True)


def test_home_lists_recent_posts(site_client, upstream):
    route = upstream.get(url__startswith=f"{CMS}/contents?").respond(
        200, json={"items": [POST], "pagination": {"total": 1}}
    )
    _runtime(upstream)
    _fallback(upstream)

    response = site_client.get("/")
    html = response.get_data(as_text=True)

    assert response.status_code == 200
    assert '<a href="/en/blog/hello">Hello world</a>' in html
    params = route.calls.last.request.url.params
    assert params["type"] == "blog" and params["status"] == "published"


def test_sitemap_is_proxied_with_cache_header(site_client, upstream):
    xml = '<?xml version="1.0"?><urlset><url><loc>https://example.com/</loc></url></urlset>'
    upstream.get(f"{CMS}/seo/sitemap.xml").respond(200, text=xml)

    response = site_client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.mimetype == "application/xml"
    assert response.headers["Cache-Control"] == "public, max-age=3600"
    assert response.get_data(as_text=True) == xml


def test_sitemap_fallback_is_empty_urlset(site_client, upstream):
    upstream.get(f"{CMS}/seo/sitemap.xml").respond(500)

    response = site_client.get("/sitemap.xml")
    body = response.get_data(as_text=True)

    assert response.status_code == 200
    assert "<urlset" in body and "<url>" not in body
    assert response.headers["Cache-Control"] == "public, max-age=3600"


def test_robots_fallback(site_client, upstream):
    upstream.get(f"{CMS}/seo/robots.txt").mock(side_effect=httpx.ConnectError("down"))

    response = site_client.get("/robots.txt")

    assert response.mimetype == "text/plain"
    assert response.headers["Cache-Control"] == "public, max-age=3600"
    assert response.get_data(as_text=True) == (
        "User-agent: *\n"
        "Allow: /\n"
        "Disallow: /dashboard\n"
        "\n"
        "Sitemap: https://example.com/sitemap.xml\n"
    )


def test_auth_proxy_forwards_request_and_cookies(site_client, upstream):
    route = upstream.post(url__startswith=f"{AUTH}/sign-in/email").respond(
        200,
        json={"ok": True},
        headers=[
            ("set-cookie", "sitekit.session_token=new; Path=/; HttpOnly"),
            ("set-cookie", "sitekit.session_data=xyz; Path=/"),
            ("x-auth-trace", "t-1"),
        ],
    )
    site_client.set_cookie("sitekit.session_token", "old")

    response = site_client.post(
        "/api/auth/sign-in/email?callbackURL=/dashboard",
        json={"email": "a@example.com", "password": "secret"},
    )

    assert response.status_code == 200
    assert response.get_json() == {"ok": True}
    assert response.headers.getlist("Set-Cookie") == [
        "sitekit.session_token=new; Path=/; HttpOnly",
        "sitekit.session_data=xyz; Path=/",
    ]
    assert response.headers["x-auth-trace"] == "t-1"

    sent = route.calls.last.request
    assert sent.url.params["callbackURL"] == "/dashboard"
    assert b'"email"' in sent.content
    assert sent.headers["cookie"] == "sitekit.session_token=old"


def test_auth_proxy_passes_upstream_status(site_client, upstream):
    upstream.get(f"{AUTH}/get-session").respond(401, json={"error": "no session"})

    response = site_client.get("/api/auth/get-session")
    assert response.status_code == 401
    assert response.get_json() == {"error": "no session"}


def test_auth_proxy_unreachable(site_client, upstream):
    upstream.route(url__startswith=AUTH).mock(side_effect=httpx.ConnectError("refused"))

    response = site_client.delete("/api/auth/session")
    assert response.status_code == 502
    assert response.get_json()["error"] == "BadGateway"
