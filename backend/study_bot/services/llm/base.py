# study_bot/services/llm/base.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


class LLMError(Exception):
    """Base exception for LLM-related errors."""
    pass


class LLMConfigurationError(LLMError):
    """Raised when the service is missing configuration, before any network call."""
    pass


class LLMConnectionError(LLMError):
    """Raised when the LLM endpoint cannot be reached."""
    pass


class LLMRequestError(LLMError):
    """Raised when the LLM endpoint answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"LLM invoke failed: {status_code} {body}".rstrip())


class InvalidResponseError(LLMError):
    """Raised when the response body lacks the expected reply field."""
    pass


class Message(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class LLMConfig(BaseModel):
    model: str
    temperature: float = Field(0.7, ge=0.0, le=2.0)
    max_tokens: Optional[int] = 2048
    extra_params: Dict[str, Any] = Field(default_factory=dict)


class TokenUsage(BaseModel):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class LLMResponse(BaseModel):
    content: Any
    model: Optional[str] = None
    usage: Optional[TokenUsage] = None


class BaseLLMService(ABC):
    """Base interface for chat-completion backends."""

    @abstractmethod
    async def chat(
            self,
            messages: list[Message],
            config: Optional[LLMConfig] = None
    ) -> LLMResponse:
        """Send the messages and return the first choice."""
        pass

    async def aclose(self) -> None:
        pass
