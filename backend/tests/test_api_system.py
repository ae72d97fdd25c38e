import json

import pytest

from study_bot.schemas.auth import Role, User
from study_bot.services.auth import COOKIE_NAME

NOTIFY_URL = "/api/v1/system/notify-owner"


@pytest.fixture
def signed_in(client, user_store, session_tokens):
    """Seed a stored user and attach their session cookie to the client."""

    def _sign_in(open_id: str, role: Role = Role.USER) -> User:
        user = User(id=len(user_store.users) + 1, open_id=open_id, name="Test User", role=role)
        user_store.users[open_id] = user
        client.cookies.set(COOKIE_NAME, session_tokens.create_session_token(open_id, name="Test User"))
        return user

    return _sign_in


def test_health_is_ok(client):
    response = client.get("/api/v1/system/health", params={"timestamp": 1700000000000})
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.parametrize("params", [{}, {"timestamp": -1}, {"timestamp": "yesterday"}])
def test_health_rejects_bad_timestamp(client, params):
    response = client.get("/api/v1/system/health", params=params)
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_notify_owner_requires_a_session(client, notification_requests):
    response = client.post(NOTIFY_URL, json={"title": "Hi", "content": "Body"})
    assert response.status_code == 403
    assert response.json()["error"]["code"] == "AUTH_002"
    assert notification_requests == []


def test_notify_owner_rejects_regular_users(client, signed_in, notification_requests):
    signed_in("student-1")
    response = client.post(NOTIFY_URL, json={"title": "Hi", "content": "Body"})
    assert response.status_code == 403
    assert notification_requests == []


def test_notify_owner_delivers_for_admin(client, signed_in, notification_requests):
    signed_in("owner-1", role=Role.ADMIN)
    response = client.post(NOTIFY_URL, json={"title": "  New signup ", "content": "A student joined"})

    assert response.status_code == 200
    assert response.json() == {"success": True}

    request = notification_requests[0]
    assert str(request.url) == "https://forge.test/webdevtoken.v1.WebDevService/SendNotification"
    assert request.headers["authorization"] == "Bearer forge-key"
    assert request.headers["connect-protocol-version"] == "1"
    assert json.loads(request.content) == {"title": "New signup", "content": "A student joined"}


def test_notify_owner_validates_payload(client, signed_in, notification_requests):
    signed_in("owner-1", role=Role.ADMIN)

    response = client.post(NOTIFY_URL, json={"title": "", "content": "Body"})
    assert response.status_code == 422

    response = client.post(NOTIFY_URL, json={"title": "   ", "content": "Body"})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NOTIFY_001"
    assert notification_requests == []
