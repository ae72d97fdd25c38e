# study_bot/dependencies.py
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from .core.config import Settings, get_settings
from .db.session import get_db
from .schemas.auth import Role, User
from .services.auth import OAuthClient, RequestAuthenticator, SessionTokenService
from .services.chat import ChatService
from .services.llm.base import BaseLLMService
from .services.notification import NotificationService
from .services.users import UserService
from .utils.errors import ForbiddenError


def get_llm_service(request: Request) -> BaseLLMService:
    return request.app.state.llm_service


def get_oauth_client(request: Request) -> OAuthClient:
    return request.app.state.oauth_client


async def get_chat_service(
        llm_service: BaseLLMService = Depends(get_llm_service)
) -> ChatService:
    return ChatService(llm_service)


async def get_user_service(
        db: Optional[AsyncSession] = Depends(get_db),
        settings: Settings = Depends(get_settings)
) -> UserService:
    return UserService(db, settings.OWNER_OPEN_ID)


def get_session_service(settings: Settings = Depends(get_settings)) -> SessionTokenService:
    return SessionTokenService(settings.JWT_SECRET, settings.VITE_APP_ID)


def get_notification_service(settings: Settings = Depends(get_settings)) -> NotificationService:
    return NotificationService.from_settings(settings)


async def get_authenticator(
        sessions: SessionTokenService = Depends(get_session_service),
        oauth: OAuthClient = Depends(get_oauth_client),
        users: UserService = Depends(get_user_service)
) -> RequestAuthenticator:
    return RequestAuthenticator(sessions, oauth, users)


async def get_current_user(
        request: Request,
        authenticator: RequestAuthenticator = Depends(get_authenticator)
) -> Optional[User]:
    return await authenticator.optional_user(request)


async def require_admin(user: Optional[User] = Depends(get_current_user)) -> User:
    if not user or user.role != Role.ADMIN:
        raise ForbiddenError()
    return user
