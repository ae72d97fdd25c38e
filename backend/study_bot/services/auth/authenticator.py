# study_bot/services/auth/authenticator.py
import logging
from datetime import datetime
from typing import Optional

import httpx
from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError

from .oauth import OAuthClient
from .session import COOKIE_NAME, SessionTokenService
from ..users import UserService
from ...schemas.auth import User, UserUpsert
from ...utils.errors import ForbiddenError

logger = logging.getLogger(__name__)


class RequestAuthenticator:
    """Resolves the signed-in user from the session cookie."""

    def __init__(self, sessions: SessionTokenService, oauth: OAuthClient, users: UserService):
        self.sessions = sessions
        self.oauth = oauth
        self.users = users

    async def authenticate(self, request: Request) -> User:
        session_cookie = request.cookies.get(COOKIE_NAME)
        session = self.sessions.verify_session(session_cookie)
        if not session:
            raise ForbiddenError("Invalid session cookie")

        signed_in_at = datetime.utcnow()
        user = await self.users.get_user_by_open_id(session.open_id)

        if not user:
            try:
                user_info = await self.oauth.get_user_info_with_jwt(session_cookie or "")
                await self.users.upsert_user(UserUpsert(
                    open_id=user_info.open_id or "",
                    name=user_info.name or None,
                    email=user_info.email,
                    login_method=user_info.login_method or user_info.platform,
                    last_signed_in=signed_in_at,
                ))
                user = await self.users.get_user_by_open_id(user_info.open_id or "")
            except (httpx.HTTPError, SQLAlchemyError, ValueError) as e:
                logger.error(f"[Auth] Failed to sync user from OAuth: {e}")
                raise ForbiddenError("Failed to sync user info") from e

        if not user:
            raise ForbiddenError("User not found")

        await self.users.upsert_user(UserUpsert(open_id=user.open_id, last_signed_in=signed_in_at))
        return user

    async def optional_user(self, request: Request) -> Optional[User]:
        try:
            return await self.authenticate(request)
        except (ForbiddenError, SQLAlchemyError) as e:
            logger.debug(f"[Auth] Anonymous request: {e}")
            return None
