from .base import (
    BaseLLMService,
    InvalidResponseError,
    LLMConfig,
    LLMConfigurationError,
    LLMConnectionError,
    LLMError,
    LLMRequestError,
    LLMResponse,
    Message,
    TokenUsage
)
from .gemini import GeminiService

__all__ = [
    'BaseLLMService',
    'InvalidResponseError',
    'LLMConfig',
    'LLMConfigurationError',
    'LLMConnectionError',
    'LLMError',
    'LLMRequestError',
    'LLMResponse',
    'Message',
    'TokenUsage',
    'GeminiService'
]
