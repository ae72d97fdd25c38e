# study_bot/services/chat.py
import json
import logging
from typing import Final

from .llm.base import BaseLLMService, LLMError, Message
from .prompts import compose_system_prompt
from .subjects import require_subject
from ..schemas.chat import ChatRequest, ChatResponse
from ..utils.errors import AIResponseError

logger = logging.getLogger(__name__)

CONCISE_REPLY_LIMIT: Final = 300
TRUNCATION_MARKER: Final = "..."
EMPTY_REPLY: Final = "No response received"


def truncate_reply(reply: str, limit: int = CONCISE_REPLY_LIMIT) -> str:
    # Hard cutoff, may split a word
    if len(reply) <= limit:
        return reply
    return reply[:limit] + TRUNCATION_MARKER


class ChatService:
    def __init__(self, llm_service: BaseLLMService):
        self.llm = llm_service

    async def chat(self, request: ChatRequest) -> ChatResponse:
        subject = require_subject(request.subject_id)

        messages = [
            Message(role="system", content=compose_system_prompt(subject, request.language, request.concise)),
            Message(role="user", content=request.message),
        ]

        try:
            response = await self.llm.chat(messages)
        except LLMError as e:
            logger.error(f"Error calling LLM for subject {subject.id.value}: {str(e)}")
            raise AIResponseError() from e

        reply = response.content or EMPTY_REPLY
        if isinstance(reply, str):
            if request.concise:
                reply = truncate_reply(reply)
        else:
            # Structured content is passed through whole
            reply = json.dumps(reply, ensure_ascii=False)

        return ChatResponse(reply=reply, success=True)
