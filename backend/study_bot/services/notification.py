# study_bot/services/notification.py
import logging
from typing import Final, Optional

import httpx

from ..core.config import Settings
from ..utils.errors import ConfigurationError, NotificationInputError

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH: Final = 1200
CONTENT_MAX_LENGTH: Final = 20000
SEND_NOTIFICATION_PATH: Final = "webdevtoken.v1.WebDevService/SendNotification"


def build_endpoint_url(base_url: str) -> str:
    normalized = base_url if base_url.endswith("/") else f"{base_url}/"
    return f"{normalized}{SEND_NOTIFICATION_PATH}"


def validate_payload(title: Optional[str], content: Optional[str]) -> tuple[str, str]:
    if not isinstance(title, str) or not title.strip():
        raise NotificationInputError("Notification title is required.")
    if not isinstance(content, str) or not content.strip():
        raise NotificationInputError("Notification content is required.")

    title, content = title.strip(), content.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise NotificationInputError(f"Notification title must be at most {TITLE_MAX_LENGTH} characters.")
    if len(content) > CONTENT_MAX_LENGTH:
        raise NotificationInputError(f"Notification content must be at most {CONTENT_MAX_LENGTH} characters.")
    return title, content


class NotificationService:
    def __init__(
            self,
            api_url: str,
            api_key: str,
            timeout: float = 30.0,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "NotificationService":
        return cls(settings.BUILT_IN_FORGE_API_URL, settings.BUILT_IN_FORGE_API_KEY, transport=transport)

    async def notify_owner(self, title: str, content: str) -> bool:
        """Deliver a notification to the project owner. False when delivery failed."""
        title, content = validate_payload(title, content)

        if not self.api_url:
            raise ConfigurationError("Notification service URL is not configured.")
        if not self.api_key:
            raise ConfigurationError("Notification service API key is not configured.")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    build_endpoint_url(self.api_url),
                    headers={
                        "accept": "application/json",
                        "authorization": f"Bearer {self.api_key}",
                        "content-type": "application/json",
                        "connect-protocol-version": "1"
                    },
                    json={"title": title, "content": content}
                )
        except httpx.HTTPError as e:
            logger.warning(f"[Notification] Error calling notification service: {e}")
            return False

        if not response.is_success:
            detail = f": {response.text}" if response.text else ""
            logger.warning(f"[Notification] Failed to notify owner ({response.status_code}){detail}")
            return False

        return True
