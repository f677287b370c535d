def _geo(client, headers, **payload):
    response = client.post("/api/v1/geo/settings", json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()


def test_geo_lookup_by_locale(client, admin_headers):
    _geo(client, admin_headers, country_code="US", language_code="en", currency="USD")
    _geo(client, admin_headers, country_code="fr", language_code="fr")

    us = client.get("/api/v1/geo/settings/en-US").get_json()
    assert us["currency"] == "USD"
    assert us["locale"] == "en-US"

    fr = client.get("/api/v1/geo/settings/fr").get_json()
    assert fr["locale"] == "fr"

    assert client.get("/api/v1/geo/settings/de-DE").status_code == 404
    assert [s["country_code"] for s in client.get("/api/v1/geo/settings").get_json()] == ["US", "fr"]


def test_geo_update(client, admin_headers):
    setting = _geo(client, admin_headers, country_code="GB", language_code="en")
    updated = client.patch(
        f"/api/v1/geo/settings/{setting['id']}",
        json={"timezone": "Europe/London"},
        headers=admin_headers,
    ).get_json()
    assert updated["timezone"] == "Europe/London"
    assert updated["country_code"] == "GB"


def test_hreflang_derived_from_enabled_settings(client, admin_headers, make_content):
    content = make_content(status="published")
    _geo(client, admin_headers, country_code="US", language_code="en", hreflang_config={"enabled": True})
    _geo(client, admin_headers, country_code="DE", language_code="de", hreflang_config={"enabled": False})
    _geo(client, admin_headers, country_code="fr", language_code="fr", hreflang_config={"enabled": True})

    links = client.get(f"/api/v1/geo/hreflang/{content['id']}").get_json()
    assert links == [
        {"locale": "en-US", "url": "https://example.com/en-US/blog/hello"},
        {"locale": "fr", "url": "https://example.com/fr/blog/hello"},
    ]


def test_hreflang_prefers_explicit_seo_entries(client, admin_headers, make_content):
    content = make_content()
    _geo(client, admin_headers, country_code="US", language_code="en", hreflang_config={"enabled": True})
    client.post(
        "/api/v1/seo/metadata",
        json={"content_id": content["id"], "hreflang": [{"locale": "es", "url": "https://example.com/es/hola"}]},
        headers=admin_headers,
    )

    links = client.get(f"/api/v1/geo/hreflang/{content['id']}").get_json()
    assert links == [{"locale": "es", "url": "https://example.com/es/hola"}]


def test_hreflang_for_missing_content(client):
    assert client.get("/api/v1/geo/hreflang/6f1c3c38-6a4e-4f55-9d0b-6d8a9f0c1e11").status_code == 404


def test_navigation_filters_and_order(client, admin_headers):
    def menu(**payload):
        response = client.post("/api/v1/navigation", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()

    menu(name="Main", location="header", order=2, items=[{"label": "Blog", "url": "/blog"}])
    menu(name="French", location="header", locale="fr", order=1)
    menu(name="German", location="header", locale="de")
    menu(name="Hidden", location="header", is_active=False)
    footer = menu(name="Footer", location="footer")

    header_fr = client.get("/api/v1/navigation?location=header&locale=fr").get_json()
    assert [m["name"] for m in header_fr] == ["French", "Main"]
    assert header_fr[1]["items"][0]["url"] == "/blog"

    client.delete(f"/api/v1/navigation/{footer['id']}", headers=admin_headers)
    assert client.get("/api/v1/navigation?location=footer").get_json() == []

    assert client.get("/api/v1/navigation?location=attic").status_code == 400
