# study_bot/api/oauth.py
import logging
from datetime import datetime
from typing import Optional

import httpx
import jwt
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from ..dependencies import get_oauth_client, get_session_service, get_user_service
from ..schemas.auth import UserUpsert
from ..services.auth import (
    COOKIE_NAME,
    ONE_YEAR_SECONDS,
    OAuthClient,
    SessionTokenService,
    session_cookie_options,
)
from ..services.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth", tags=["oauth"])


@router.get("/callback")
async def oauth_callback(
        request: Request,
        code: Optional[str] = None,
        state: Optional[str] = None,
        oauth: OAuthClient = Depends(get_oauth_client),
        sessions: SessionTokenService = Depends(get_session_service),
        users: UserService = Depends(get_user_service)
):
    if not code or not state:
        return JSONResponse(status_code=400, content={"error": "code and state are required"})

    try:
        token_response = await oauth.exchange_code_for_token(code, state)
        user_info = await oauth.get_user_info(token_response["accessToken"])
        if not user_info.open_id:
            return JSONResponse(status_code=400, content={"error": "openId missing from user info"})

        await users.upsert_user(UserUpsert(
            open_id=user_info.open_id,
            name=user_info.name or None,
            email=user_info.email,
            login_method=user_info.login_method or user_info.platform,
            last_signed_in=datetime.utcnow(),
        ))
        session_token = sessions.create_session_token(
            user_info.open_id,
            name=user_info.name or "",
            expires_in=ONE_YEAR_SECONDS
        )
    except (httpx.HTTPError, jwt.PyJWTError, SQLAlchemyError, KeyError, ValueError) as e:
        logger.error(f"[OAuth] Callback failed: {e}")
        return JSONResponse(status_code=500, content={"error": "OAuth callback failed"})

    response = RedirectResponse(url="/", status_code=302)
    response.set_cookie(COOKIE_NAME, session_token, max_age=ONE_YEAR_SECONDS, **session_cookie_options(request))
    return response
