# study_bot/api/auth.py
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response

from ..dependencies import get_current_user
from ..schemas.auth import LogoutResponse, User
from ..services.auth import COOKIE_NAME, session_cookie_options

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
async def me(user: Optional[User] = Depends(get_current_user)) -> Optional[User]:
    return user


@router.post("/logout")
async def logout(request: Request, response: Response) -> LogoutResponse:
    response.delete_cookie(COOKIE_NAME, **session_cookie_options(request))
    return LogoutResponse(success=True)
