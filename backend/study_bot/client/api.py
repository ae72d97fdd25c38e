# study_bot/client/api.py
import logging
from typing import Optional

import httpx

from ..schemas.chat import ChatRequest, ChatResponse
from ..schemas.subject import Language

logger = logging.getLogger(__name__)


class TutorAPIError(Exception):
    """Raised when the tutor API rejects a call or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class TutorAPIClient:
    """Async client for the study bot RPC surface."""

    def __init__(
            self,
            base_url: str = "http://localhost:8000",
            api_prefix: str = "/api/v1",
            timeout: float = 60.0,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_prefix = api_prefix
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def chat(
            self,
            subject_id: str,
            message: str,
            language: Language,
            concise: bool = False
    ) -> ChatResponse:
        request = ChatRequest(subject_id=subject_id, message=message, language=language, concise=concise)
        try:
            response = await self._client.post(
                f"{self.api_prefix}/ai/chat",
                json=request.model_dump(mode="json", by_alias=True)
            )
        except httpx.HTTPError as e:
            raise TutorAPIError(f"Tutor API unreachable: {e}") from e

        if not response.is_success:
            try:
                message = response.json()["error"]["message"]
            except (ValueError, KeyError, TypeError):
                message = response.text
            raise TutorAPIError(message, response.status_code)

        return ChatResponse.model_validate(response.json())

    async def health(self, timestamp: float) -> bool:
        response = await self._client.get(f"{self.api_prefix}/system/health", params={"timestamp": timestamp})
        return response.is_success and response.json().get("ok") is True

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
