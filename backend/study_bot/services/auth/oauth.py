# study_bot/services/auth/oauth.py
import base64
import logging
from typing import Any, Dict, Final, Iterable, Optional

import httpx

from ...core.config import Settings
from ...schemas.auth import OAuthUserInfo

logger = logging.getLogger(__name__)

EXCHANGE_TOKEN_PATH: Final = "/webdev.v1.WebDevAuthPublicService/ExchangeToken"
GET_USER_INFO_PATH: Final = "/webdev.v1.WebDevAuthPublicService/GetUserInfo"
GET_USER_INFO_WITH_JWT_PATH: Final = "/webdev.v1.WebDevAuthPublicService/GetUserInfoWithJwt"

# Checked in order, first match wins
PLATFORM_LOGIN_METHODS: Final = (
    (("REGISTERED_PLATFORM_EMAIL",), "email"),
    (("REGISTERED_PLATFORM_GOOGLE",), "google"),
    (("REGISTERED_PLATFORM_APPLE",), "apple"),
    (("REGISTERED_PLATFORM_MICROSOFT", "REGISTERED_PLATFORM_AZURE"), "microsoft"),
    (("REGISTERED_PLATFORM_GITHUB",), "github"),
)


def derive_login_method(platforms: Optional[Iterable[Any]], fallback: Optional[str]) -> Optional[str]:
    if fallback:
        return fallback
    if not platforms or isinstance(platforms, str):
        return None

    names = [p for p in platforms if isinstance(p, str)]
    for candidates, method in PLATFORM_LOGIN_METHODS:
        if any(name in names for name in candidates):
            return method
    return names[0].lower() if names else None


def decode_state(state: str) -> str:
    """The OAuth state carries the base64-encoded redirect URI."""
    return base64.b64decode(state).decode("utf-8")


class OAuthClient:
    def __init__(
            self,
            base_url: str,
            app_id: str,
            timeout: float = 30.0,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        if not base_url:
            logger.error("[OAuth] OAUTH_SERVER_URL is not configured")
        self.base_url = base_url
        self.app_id = app_id
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "OAuthClient":
        return cls(settings.OAUTH_SERVER_URL, settings.VITE_APP_ID, transport=transport)

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = await self._client.post(path, json=payload)
        response.raise_for_status()
        return response.json()

    async def exchange_code_for_token(self, code: str, state: str) -> Dict[str, Any]:
        return await self._post(EXCHANGE_TOKEN_PATH, {
            "clientId": self.app_id,
            "grantType": "authorization_code",
            "code": code,
            "redirectUri": decode_state(state),
        })

    def _to_user_info(self, data: Dict[str, Any]) -> OAuthUserInfo:
        login_method = derive_login_method(data.get("platforms"), data.get("platform"))
        return OAuthUserInfo.model_validate({**data, "platform": login_method, "loginMethod": login_method})

    async def get_user_info(self, access_token: str) -> OAuthUserInfo:
        data = await self._post(GET_USER_INFO_PATH, {"accessToken": access_token})
        return self._to_user_info(data)

    async def get_user_info_with_jwt(self, jwt_token: str) -> OAuthUserInfo:
        data = await self._post(GET_USER_INFO_WITH_JWT_PATH, {
            "jwtToken": jwt_token,
            "projectId": self.app_id,
        })
        return self._to_user_info(data)

    async def aclose(self) -> None:
        await self._client.aclose()
