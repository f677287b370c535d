def test_generate_combines_global_attached_and_templates(client, admin_headers, make_content):
    content = make_content(excerpt="Short summary", status="published")

    client.post(
        "/api/v1/structured-data/schemas",
        json={"schema_type": "Organization", "schema_data": {"name": "Example Inc"}, "is_global": True},
        headers=admin_headers,
    )
    client.post(
        "/api/v1/structured-data/schemas",
        json={"schema_type": "FAQPage", "schema_data": {"mainEntity": []}, "content_id": content["id"]},
        headers=admin_headers,
    )
    client.post(
        "/api/v1/structured-data/templates",
        json={
            "schema_type": "BlogPosting",
            "template_json": {
                "headline": "{{title}}",
                "description": "{{ excerpt }}",
                "url": "{{url}}",
                "timeRequired": "{{reading_time}}",
                "about": "Post: {{title}} ({{unknown}})",
            },
            "content_type_mapping": "blog",
            "auto_generate": True,
        },
        headers=admin_headers,
    )
    client.post(
        "/api/v1/structured-data/templates",
        json={"schema_type": "TechArticle", "template_json": {"headline": "{{title}}"}, "content_type_mapping": "docs", "auto_generate": True},
        headers=admin_headers,
    )

    documents = client.get(f"/api/v1/structured-data/generate/{content['id']}").get_json()

    assert [d["@type"] for d in documents] == ["Organization", "FAQPage", "BlogPosting"]
    assert all(d["@context"] == "https://schema.org" for d in documents)
    posting = documents[2]
    assert posting["headline"] == "Hello world"
    assert posting["description"] == "Short summary"
    assert posting["url"] == "https://example.com/blog/hello"
    assert posting["timeRequired"] == 1
    assert posting["about"] == "Post: Hello world ()"


def test_generate_for_missing_content(client):
    response = client.get("/api/v1/structured-data/generate/6f1c3c38-6a4e-4f55-9d0b-6d8a9f0c1e11")
    assert response.status_code == 404


def test_templates_crud(client, admin_headers):
    created = client.post(
        "/api/v1/structured-data/templates",
        json={"schema_type": "Article", "template_json": {"headline": "{{title}}"}},
        headers=admin_headers,
    ).get_json()
    assert created["auto_generate"] is False

    updated = client.patch(
        f"/api/v1/structured-data/templates/{created['id']}",
        json={"is_active": False},
        headers=admin_headers,
    ).get_json()
    assert updated["is_active"] is False

    assert [t["id"] for t in client.get("/api/v1/structured-data/templates").get_json()] == [created["id"]]


def test_schema_type_must_be_known(client, admin_headers):
    response = client.post(
        "/api/v1/structured-data/schemas",
        json={"schema_type": "Spaceship", "schema_data": {}},
        headers=admin_headers,
    )
    assert response.status_code == 400
