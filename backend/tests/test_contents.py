from sitekit.models.content_version import ContentVersion


def test_create_defaults_to_draft_with_reading_time(client, admin_headers):
    body = " ".join(["word"] * 401)
    response = client.post(
        "/api/v1/contents",
        json={"title": "Long read", "slug": "long-read", "body": body, "type": "docs"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    data = response.get_json()
    assert data["status"] == "draft"
    assert data["published_at"] is None
    assert data["reading_time"] == 3
    assert data["author_id"] == "admin-1"


def test_create_requires_admin(client, user_headers):
    payload = {"title": "T", "slug": "t", "body": "b", "type": "blog"}

    assert client.post("/api/v1/contents", json=payload).status_code == 401
    assert client.post("/api/v1/contents", json=payload, headers=user_headers).status_code == 403


def test_create_rejects_invalid_payload(client, admin_headers):
    response = client.post(
        "/api/v1/contents",
        json={"title": "T", "slug": "Not A Slug", "body": "b", "type": "podcast"},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "ValidationError"


def test_duplicate_slug_conflicts(client, admin_headers, make_content):
    make_content()
    response = client.post(
        "/api/v1/contents",
        json={"title": "Other", "slug": "hello", "body": "b", "type": "page"},
        headers=admin_headers,
    )
    assert response.status_code == 409


def test_slug_is_reusable_after_delete(client, admin_headers, make_content):
    content = make_content()
    assert client.delete(f"/api/v1/contents/{content['id']}", headers=admin_headers).status_code == 204

    make_content(title="Second life")


def test_unknown_category_is_not_found(client, admin_headers):
    response = client.post(
        "/api/v1/contents",
        json={
            "title": "T",
            "slug": "t",
            "body": "b",
            "type": "blog",
            "category_id": "6f1c3c38-6a4e-4f55-9d0b-6d8a9f0c1e11",
        },
        headers=admin_headers,
    )
    assert response.status_code == 404
    assert response.get_json()["message"] == "Category not found"


def test_find_by_slug_hides_drafts_unless_requested(client, make_content):
    make_content()

    assert client.get("/api/v1/contents/slug/hello").status_code == 404
    response = client.get("/api/v1/contents/slug/hello?includeDrafts=true")
    assert response.status_code == 200
    assert response.get_json()["slug"] == "hello"


def test_find_by_slug_returns_published(client, make_content):
    make_content(status="published")

    response = client.get("/api/v1/contents/slug/hello")
    assert response.status_code == 200
    assert response.get_json()["status"] == "published"


def test_publish_then_unpublish_keeps_published_at(client, admin_headers, make_content):
    content = make_content()

    published = client.post(f"/api/v1/contents/{content['id']}/publish", headers=admin_headers).get_json()
    assert published["status"] == "published"
    assert published["published_at"] is not None

    unpublished = client.post(f"/api/v1/contents/{content['id']}/unpublish", headers=admin_headers).get_json()
    assert unpublished["status"] == "draft"
    assert unpublished["published_at"] == published["published_at"]


def test_each_update_records_one_version(app, client, admin_headers, make_content):
    content = make_content()
    url = f"/api/v1/contents/{content['id']}"

    client.patch(url, json={"title": "Renamed", "change_note": "new title"}, headers=admin_headers)
    client.patch(url, json={}, headers=admin_headers)

    versions = client.get(f"{url}/versions", headers=admin_headers).get_json()
    assert [v["version"] for v in versions] == [2, 1]
    assert versions[1]["title"] == "Hello world"
    assert versions[1]["change_note"] == "new title"
    assert versions[1]["metadata"]["status"] == "draft"
    assert versions[0]["title"] == "Renamed"
    assert ContentVersion.query.filter_by(content_id=content["id"]).count() == 2


def test_failed_update_leaves_no_version(client, admin_headers, make_content):
    content = make_content()

    response = client.patch(
        f"/api/v1/contents/{content['id']}",
        json={"category_id": "6f1c3c38-6a4e-4f55-9d0b-6d8a9f0c1e11"},
        headers=admin_headers,
    )

    assert response.status_code == 404
    assert ContentVersion.query.filter_by(content_id=content["id"]).count() == 0


def test_update_clears_category_and_tags(client, admin_headers, make_content):
    category = client.post(
        "/api/v1/categories", json={"name": "News", "slug": "news"}, headers=admin_headers
    ).get_json()
    tag = client.post(
        "/api/v1/tags", json={"name": "Python", "slug": "python"}, headers=admin_headers
    ).get_json()
    content = make_content(category_id=category["id"], tag_ids=[tag["id"], "missing-tag"])

    assert content["category"]["slug"] == "news"
    assert [t["slug"] for t in content["tags"]] == ["python"]

    updated = client.patch(
        f"/api/v1/contents/{content['id']}",
        json={"category_id": None, "tag_ids": []},
        headers=admin_headers,
    ).get_json()

    assert updated["category_id"] is None
    assert updated["tags"] == []


def test_update_null_clears_excerpt_and_image(client, admin_headers, make_content):
    content = make_content(excerpt="Short intro", featured_image="/uploads/cover.png")
    assert content["excerpt"] == "Short intro"

    updated = client.patch(
        f"/api/v1/contents/{content['id']}",
        json={"excerpt": None, "featured_image": None, "title": None},
        headers=admin_headers,
    ).get_json()

    assert updated["excerpt"] is None
    assert updated["featured_image"] is None
    assert updated["title"] == "Hello world"


def test_update_recomputes_reading_time(client, admin_headers, make_content):
    content = make_content()
    updated = client.patch(
        f"/api/v1/contents/{content['id']}",
        json={"body": " ".join(["w"] * 250)},
        headers=admin_headers,
    ).get_json()
    assert updated["reading_time"] == 2


def test_stale_update_conflicts(client, admin_headers, make_content):
    content = make_content()
    response = client.patch(
        f"/api/v1/contents/{content['id']}",
        json={"title": "Late"},
        headers={**admin_headers, "If-Unmodified-Since": "Mon, 01 Jan 2001 00:00:00 GMT"},
    )
    assert response.status_code == 409


def test_list_filters_and_paginates(client, admin_headers, make_content):
    tag = client.post(
        "/api/v1/tags", json={"name": "Flask", "slug": "flask"}, headers=admin_headers
    ).get_json()
    make_content(slug="first", title="First post", tag_ids=[tag["id"]])
    make_content(slug="second", title="Second post", type="docs", body="Searchable Needle inside")
    make_content(slug="third", title="Third post", status="published")

    everything = client.get("/api/v1/contents?limit=2").get_json()
    assert everything["pagination"]["total"] == 3
    assert everything["pagination"]["has_next"] is True
    assert [c["slug"] for c in everything["items"]] == ["third", "second"]
    assert "body" not in everything["items"][0]

    assert [c["slug"] for c in client.get("/api/v1/contents?type=docs").get_json()["items"]] == ["second"]
    assert [c["slug"] for c in client.get("/api/v1/contents?status=published").get_json()["items"]] == ["third"]
    assert [c["slug"] for c in client.get("/api/v1/contents?search=needle").get_json()["items"]] == ["second"]
    assert [c["slug"] for c in client.get("/api/v1/contents?tagSlug=flask").get_json()["items"]] == ["first"]

    second_page = client.get("/api/v1/contents?limit=2&page=2").get_json()
    assert [c["slug"] for c in second_page["items"]] == ["first"]
    assert second_page["pagination"]["has_previous"] is True


def test_list_rejects_bad_enum_and_paging(client):
    assert client.get("/api/v1/contents?type=podcast").status_code == 400
    assert client.get("/api/v1/contents?limit=0").status_code == 400
    assert client.get("/api/v1/contents?page=abc").status_code == 400


def test_deleted_content_is_gone(client, admin_headers, make_content):
    content = make_content(status="published")
    client.delete(f"/api/v1/contents/{content['id']}", headers=admin_headers)

    assert client.get(f"/api/v1/contents/{content['id']}").status_code == 404
    assert client.get("/api/v1/contents/slug/hello").status_code == 404
