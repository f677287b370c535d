import pytest
from flask_jwt_extended import create_access_token

from sitekit import create_app
from sitekit.extensions import db
from sitekit.storage import StorageBackends
from sitekit.storage.local import LocalStorage


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = str(tmp_path)
    app.extensions["media_storage"] = StorageBackends(
        local=LocalStorage(upload_dir=str(tmp_path), base_url="https://api.example.com/uploads"),
    )

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _bearer(identity, role):
    token = create_access_token(
        identity=identity,
        additional_claims={"role": role, "email": f"{identity}@example.com"},
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(app):
    return _bearer("admin-1", "admin")


@pytest.fixture
def user_headers(app):
    return _bearer("user-1", "user")


@pytest.fixture
def make_content(client, admin_headers):
    def _make(**overrides):
        payload = {
            "title": "Hello world",
            "slug": "hello",
            "body": "one two three",
            "type": "blog",
        }
        payload.update(overrides)
        response = client.post("/api/v1/contents", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _make
