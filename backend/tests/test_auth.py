import httpx
import pytest

SESSION_URL = "http://auth.test/api/auth/get-session"
PAYLOAD = {"title": "Hello world", "slug": "hello", "body": "one two three", "type": "blog"}


def _session(role):
    return {
        "session": {"id": "sess-1", "userId": "user-42"},
        "user": {"id": "user-42", "email": "editor@example.com", "role": role},
    }


@pytest.fixture
def session_cookie(client):
    client.set_cookie("sitekit.session_token", "abc")
    return client


def test_session_cookie_admin_can_write(session_cookie, respx_mock):
    route = respx_mock.get(SESSION_URL).respond(200, json=_session("admin"))

    response = session_cookie.post("/api/v1/contents", json=PAYLOAD)

    assert response.status_code == 201
    assert response.get_json()["author_id"] == "user-42"
    assert "sitekit.session_token=abc" in route.calls.last.request.headers["cookie"]


def test_session_cookie_user_role_is_forbidden(session_cookie, respx_mock):
    respx_mock.get(SESSION_URL).respond(200, json=_session("user"))

    response = session_cookie.post("/api/v1/contents", json=PAYLOAD)
    assert response.status_code == 403


def test_missing_role_defaults_to_user(session_cookie, respx_mock):
    payload = _session("admin")
    payload["user"].pop("role")
    respx_mock.get(SESSION_URL).respond(200, json=payload)

    assert session_cookie.post("/api/v1/contents", json=PAYLOAD).status_code == 403


def test_no_session_is_unauthorized(session_cookie, respx_mock):
    respx_mock.get(SESSION_URL).respond(200, json=None)

    response = session_cookie.post("/api/v1/contents", json=PAYLOAD)
    assert response.status_code == 401
    assert response.get_json()["error"] == "Unauthorized"


def test_auth_service_down_is_unauthorized(session_cookie, respx_mock):
    respx_mock.get(SESSION_URL).mock(side_effect=httpx.ConnectError("refused"))

    response = session_cookie.post("/api/v1/contents", json=PAYLOAD)
    assert response.status_code == 401


def test_without_credentials_is_unauthorized(client, respx_mock):
    # No route is registered, so any call to the auth service fails the test
    assert client.post("/api/v1/contents", json=PAYLOAD).status_code == 401
