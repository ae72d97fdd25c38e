# study_bot/services/llm/gemini.py
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ...core.config import Settings
from .base import (
    BaseLLMService,
    InvalidResponseError,
    LLMConfig,
    LLMConfigurationError,
    LLMConnectionError,
    LLMRequestError,
    LLMResponse,
    Message,
    TokenUsage,
)

logger = logging.getLogger(__name__)


class GeminiService(BaseLLMService):
    """Gemini through its OpenAI-compatible chat completions endpoint."""

    def __init__(
            self,
            api_key: Optional[str],
            base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai",
            default_config: Optional[LLMConfig] = None,
            timeout: float = 30.0,
            transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.default_config = default_config or LLMConfig(model="gemini-2.0-flash")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GeminiService":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            base_url=settings.LLM_BASE_URL,
            default_config=LLMConfig(
                model=settings.LLM_MODEL,
                temperature=settings.LLM_TEMPERATURE,
                max_tokens=settings.LLM_MAX_TOKENS
            ),
            timeout=settings.LLM_TIMEOUT_SECONDS,
            transport=transport
        )

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json"
                },
                transport=self._transport
            )
        return self._client

    def build_payload(self, messages: list[Message], config: LLMConfig) -> Dict[str, Any]:
        return {
            "model": config.model,
            "messages": [message.model_dump() for message in messages],
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
            **config.extra_params
        }

    async def chat(
            self,
            messages: list[Message],
            config: Optional[LLMConfig] = None
    ) -> LLMResponse:
        if not self.api_key or not self.api_key.strip():
            raise LLMConfigurationError(
                "Gemini API key not configured. Please set GEMINI_API_KEY environment variable."
            )

        config = config or self.default_config
        logger.debug(f"Sending {len(messages)} messages to {config.model}")

        try:
            response = await self._get_client().post(
                "/chat/completions",
                json=self.build_payload(messages, config)
            )
        except httpx.HTTPError as e:
            logger.error(f"[LLM] Connection error: {str(e)}")
            raise LLMConnectionError(f"Failed to reach LLM API: {str(e)}") from e

        if not response.is_success:
            logger.error(f"[LLM] API Error: {response.status_code} - {response.text}")
            raise LLMRequestError(response.status_code, response.text)

        try:
            data = response.json()
            message = data["choices"][0]["message"]
            if not isinstance(message, dict):
                raise TypeError("message is not an object")
            usage = data.get("usage")
            return LLMResponse(
                content=message.get("content"),
                model=data.get("model"),
                usage=TokenUsage.model_validate(usage) if isinstance(usage, dict) else None
            )
        except (ValueError, KeyError, IndexError, TypeError, ValidationError) as e:
            raise InvalidResponseError("Invalid response format from LLM API") from e

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
