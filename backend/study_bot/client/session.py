# study_bot/client/session.py
import logging
from datetime import datetime
from enum import Enum
from typing import Literal, Optional, Protocol
from uuid import uuid4

from pydantic import BaseModel, Field

from .i18n import translate
from ..schemas.chat import ChatResponse
from ..schemas.subject import Language, Subject
from ..services.subjects import require_subject

logger = logging.getLogger(__name__)

GREETING_ID = "greeting"


class ChatTransport(Protocol):
    async def chat(
            self,
            subject_id: str,
            message: str,
            language: Language,
            concise: bool = False
    ) -> ChatResponse: ...


class SessionState(str, Enum):
    SHOWING_GREETING = "showing_greeting"
    AWAITING_INPUT = "awaiting_input"
    SENDING = "sending"


class SessionBusyError(RuntimeError):
    """Raised when a message is sent while another one is still outstanding."""
    pass


class ChatMessage(BaseModel):
    id: str = Field(default_factory=lambda: uuid4().hex)
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)


class ChatSession:
    """
    Conversation with one subject tutor, held in memory only.

    The session opens on the subject's localized greeting. Each send appends the
    user message, waits for the relay and appends either the reply or a
    localized error bubble. Only one send may be outstanding at a time.
    """

    def __init__(
            self,
            subject_id: str,
            transport: ChatTransport,
            language: Language = Language.AR,
            concise: bool = False
    ):
        self.subject: Subject = require_subject(subject_id)
        self.transport = transport
        self.language = language
        self.concise = concise
        self.messages: list[ChatMessage] = []
        self.last_error: Optional[Exception] = None
        self.state = SessionState.SHOWING_GREETING
        self._show_greeting()

    def _show_greeting(self) -> None:
        self.messages = [ChatMessage(
            id=GREETING_ID,
            role="assistant",
            content=self.subject.greeting(self.language)
        )]

    @property
    def can_send(self) -> bool:
        return self.state != SessionState.SENDING

    def set_language(self, language: Language) -> None:
        if language == self.language:
            return
        self.language = language
        self._show_greeting()
        # An outstanding send keeps the session busy
        if self.state != SessionState.SENDING:
            self.state = SessionState.SHOWING_GREETING

    async def send(self, text: str) -> Optional[ChatMessage]:
        """Send one message. Returns the assistant bubble, or None for blank input."""
        if not text or not text.strip():
            return None
        if not self.can_send:
            raise SessionBusyError("A message is already being sent")

        self.messages.append(ChatMessage(role="user", content=text))
        self.state = SessionState.SENDING
        self.last_error = None

        try:
            response = await self.transport.chat(
                self.subject.id.value,
                text,
                self.language,
                concise=self.concise
            )
            reply = ChatMessage(role="assistant", content=response.reply)
        except Exception as e:
            logger.warning(f"Chat request for {self.subject.id.value} failed: {e}")
            self.last_error = e
            reply = ChatMessage(role="assistant", content=translate("chat.error", self.language))
        finally:
            self.state = SessionState.AWAITING_INPUT

        self.messages.append(reply)
        return reply
