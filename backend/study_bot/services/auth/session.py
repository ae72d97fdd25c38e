# study_bot/services/auth/session.py
import logging
import time
from typing import Any, Dict, Final, Optional

import jwt
from fastapi import Request

from ...schemas.auth import SessionPayload

logger = logging.getLogger(__name__)

COOKIE_NAME: Final = "app_session_id"
ONE_YEAR_SECONDS: Final = 60 * 60 * 24 * 365
ALGORITHM: Final = "HS256"


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


class SessionTokenService:
    def __init__(self, secret: str, app_id: str):
        self.secret = secret
        self.app_id = app_id

    def create_session_token(
            self,
            open_id: str,
            name: str = "",
            expires_in: int = ONE_YEAR_SECONDS
    ) -> str:
        payload = {
            "openId": open_id,
            "appId": self.app_id,
            "name": name,
            "exp": int(time.time()) + expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=ALGORITHM)

    def verify_session(self, token: Optional[str]) -> Optional[SessionPayload]:
        if not token:
            logger.warning("[Auth] Missing session cookie")
            return None

        try:
            decoded = jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except jwt.PyJWTError as e:
            logger.warning(f"[Auth] Session verification failed: {e}")
            return None

        open_id, app_id, name = decoded.get("openId"), decoded.get("appId"), decoded.get("name")
        if not all(_is_non_empty_string(v) for v in (open_id, app_id, name)):
            logger.warning("[Auth] Session payload missing required fields")
            return None

        return SessionPayload(open_id=open_id, app_id=app_id, name=name)


def is_secure_request(request: Request) -> bool:
    if request.url.scheme == "https":
        return True
    forwarded_proto = request.headers.get("x-forwarded-proto")
    if not forwarded_proto:
        return False
    return any(proto.strip().lower() == "https" for proto in forwarded_proto.split(","))


def session_cookie_options(request: Request) -> Dict[str, Any]:
    return {
        "httponly": True,
        "path": "/",
        "samesite": "none",
        "secure": is_secure_request(request),
    }
