"""
Shared fixtures: a scripted LLM backend, an in-memory user store and a
TestClient with the outbound collaborators swapped out.
"""

from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from study_bot.core.config import Settings, get_settings
from study_bot.dependencies import (
    get_llm_service,
    get_notification_service,
    get_oauth_client,
    get_user_service,
)
from study_bot.main import app
from study_bot.schemas.auth import Role, User, UserUpsert
from study_bot.services.auth import OAuthClient, SessionTokenService
from study_bot.services.llm.base import BaseLLMService, LLMConfig, LLMResponse, Message
from study_bot.services.notification import NotificationService
from study_bot.services.users import UserService

TEST_SECRET = "test-secret-key-for-unit-tests-1234567890"
TEST_APP_ID = "test-app"


class FakeLLMService(BaseLLMService):
    """Returns a canned reply (or raises) and records every call."""

    def __init__(self, content="The answer is 4.", error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.calls: list[list[Message]] = []

    async def chat(self, messages: list[Message], config: Optional[LLMConfig] = None) -> LLMResponse:
        self.calls.append(messages)
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, model="fake-model")


class InMemoryUserService(UserService):
    def __init__(self, owner_open_id: str = ""):
        super().__init__(None, owner_open_id)
        self.users: dict[str, User] = {}
        self.upserts: list[UserUpsert] = []

    async def upsert_user(self, user: UserUpsert) -> Optional[User]:
        if not user.open_id:
            raise ValueError("User openId is required for upsert")
        self.upserts.append(user)
        existing = self.users.get(user.open_id)
        values = user.model_dump(exclude_unset=True, exclude={"open_id"})
        if existing is None:
            role = values.pop("role", None) or (Role.ADMIN if user.open_id == self.owner_open_id else Role.USER)
            existing = User(id=len(self.users) + 1, open_id=user.open_id, role=role, **values)
        else:
            existing = existing.model_copy(update=values)
        self.users[user.open_id] = existing
        return existing

    async def get_user_by_open_id(self, open_id: str) -> Optional[User]:
        return self.users.get(open_id)


def oauth_transport(routes: dict) -> httpx.MockTransport:
    """MockTransport answering POSTs by path; unknown paths get a 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        reply = routes.get(request.url.path)
        if reply is None:
            return httpx.Response(404, json={"message": "not found"})
        if callable(reply):
            return reply(request)
        return httpx.Response(200, json=reply)

    return httpx.MockTransport(handler)


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        JWT_SECRET=TEST_SECRET,
        VITE_APP_ID=TEST_APP_ID,
        OAUTH_SERVER_URL="https://oauth.test",
        OWNER_OPEN_ID="owner-1",
        BUILT_IN_FORGE_API_URL="https://forge.test",
        BUILT_IN_FORGE_API_KEY="forge-key",
    )


@pytest.fixture
def session_tokens(test_settings):
    return SessionTokenService(test_settings.JWT_SECRET, test_settings.VITE_APP_ID)


@pytest.fixture
def fake_llm():
    return FakeLLMService()


@pytest.fixture
def user_store(test_settings):
    return InMemoryUserService(test_settings.OWNER_OPEN_ID)


@pytest.fixture
def oauth_routes():
    return {}


@pytest.fixture
def notification_requests():
    return []


@pytest.fixture
def client(test_settings, fake_llm, user_store, oauth_routes, notification_requests):
    def notification_handler(request: httpx.Request) -> httpx.Response:
        notification_requests.append(request)
        return httpx.Response(200, json={})

    oauth = OAuthClient(
        test_settings.OAUTH_SERVER_URL,
        test_settings.VITE_APP_ID,
        transport=oauth_transport(oauth_routes)
    )
    notifications = NotificationService.from_settings(
        test_settings,
        transport=httpx.MockTransport(notification_handler)
    )

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_llm_service] = lambda: fake_llm
    app.dependency_overrides[get_user_service] = lambda: user_store
    app.dependency_overrides[get_oauth_client] = lambda: oauth
    app.dependency_overrides[get_notification_service] = lambda: notifications

    yield TestClient(app)

    app.dependency_overrides.clear()
