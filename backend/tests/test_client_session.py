"""
Client-side chat session and the HTTP client it talks through.
"""

import asyncio
from typing import Optional

import httpx
import pytest

from study_bot.client import (
    ChatSession,
    SessionBusyError,
    SessionState,
    TutorAPIClient,
    TutorAPIError,
    translate,
)
from study_bot.dependencies import get_llm_service
from study_bot.main import app
from study_bot.schemas.chat import ChatResponse
from study_bot.schemas.subject import Language
from study_bot.services.llm.base import LLMRequestError
from study_bot.utils.errors import SubjectNotFoundError

from conftest import FakeLLMService


class ScriptedTransport:
    def __init__(self, reply: str = "Photosynthesis makes sugar.", error: Optional[Exception] = None):
        self.reply = reply
        self.error = error
        self.calls = []
        self.release: Optional[asyncio.Event] = None

    async def chat(self, subject_id, message, language, concise=False):
        self.calls.append((subject_id, message, language, concise))
        if self.release is not None:
            await self.release.wait()
        if self.error:
            raise self.error
        return ChatResponse(reply=self.reply, success=True)


def test_session_opens_on_localized_greeting():
    session = ChatSession("biology", ScriptedTransport(), language=Language.EN)
    assert session.state == SessionState.SHOWING_GREETING
    assert [m.id for m in session.messages] == ["greeting"]
    assert session.messages[0].content == session.subject.greeting_en


def test_unknown_subject_cannot_open_a_session():
    with pytest.raises(SubjectNotFoundError):
        ChatSession("astrology", ScriptedTransport())


def test_switching_language_replaces_greeting():
    session = ChatSession("physics", ScriptedTransport(), language=Language.AR)
    session.set_language(Language.EN)
    assert len(session.messages) == 1
    assert session.messages[0].content == session.subject.greeting_en


@pytest.mark.asyncio
async def test_send_appends_user_and_reply():
    transport = ScriptedTransport()
    session = ChatSession("biology", transport, language=Language.EN, concise=True)

    reply = await session.send("What is photosynthesis?")

    assert reply.content == "Photosynthesis makes sugar."
    assert [m.role for m in session.messages] == ["assistant", "user", "assistant"]
    assert transport.calls == [("biology", "What is photosynthesis?", Language.EN, True)]
    assert session.state == SessionState.AWAITING_INPUT


@pytest.mark.asyncio
async def test_blank_input_is_ignored():
    transport = ScriptedTransport()
    session = ChatSession("biology", transport)
    assert await session.send("   ") is None
    assert transport.calls == []
    assert len(session.messages) == 1


@pytest.mark.asyncio
async def test_failure_shows_localized_error_bubble():
    error = TutorAPIError("Failed to get AI response", 502)
    session = ChatSession("chemistry", ScriptedTransport(error=error), language=Language.AR)

    reply = await session.send("ما هو الماء؟")

    assert reply.content == translate("chat.error", Language.AR)
    assert session.last_error is error
    assert session.can_send is True


@pytest.mark.asyncio
async def test_only_one_send_outstanding():
    transport = ScriptedTransport()
    transport.release = asyncio.Event()
    session = ChatSession("mathematics", transport, language=Language.EN)

    first = asyncio.create_task(session.send("2+2?"))
    await asyncio.sleep(0)
    assert session.state == SessionState.SENDING
    assert session.can_send is False

    with pytest.raises(SessionBusyError):
        await session.send("3+3?")

    transport.release.set()
    await first
    assert session.can_send is True
    assert len(transport.calls) == 1


@pytest.mark.asyncio
async def test_language_switch_keeps_outstanding_send_busy():
    transport = ScriptedTransport()
    transport.release = asyncio.Event()
    session = ChatSession("mathematics", transport, language=Language.EN)

    first = asyncio.create_task(session.send("2+2?"))
    await asyncio.sleep(0)

    session.set_language(Language.AR)
    assert session.messages[0].content == session.subject.greeting_ar
    assert session.state == SessionState.SENDING
    assert session.can_send is False

    with pytest.raises(SessionBusyError):
        await session.send("3+3?")

    transport.release.set()
    await first
    assert [call[1] for call in transport.calls] == ["2+2?"]
    assert session.state == SessionState.AWAITING_INPUT


# --------------- HTTP client against the app ---------------

@pytest.fixture
def api_llm():
    llm = FakeLLMService(content="Four.")
    app.dependency_overrides[get_llm_service] = lambda: llm
    yield llm
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_api_client_round_trip(api_llm):
    async with TutorAPIClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
        response = await client.chat("mathematics", "2+2?", Language.EN, concise=True)
        healthy = await client.health(1700000000000)

    assert response == ChatResponse(reply="Four.", success=True)
    assert healthy is True


@pytest.mark.asyncio
async def test_api_client_surfaces_error_message(api_llm):
    api_llm.error = LLMRequestError(500, "upstream")
    async with TutorAPIClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
        with pytest.raises(TutorAPIError) as exc_info:
            await client.chat("mathematics", "2+2?", Language.EN)

        with pytest.raises(TutorAPIError) as not_found:
            await client.chat("astrology", "hi", Language.EN)

    assert exc_info.value.status_code == 502
    assert str(exc_info.value) == "Failed to get AI response"
    assert not_found.value.status_code == 404


@pytest.mark.asyncio
async def test_session_over_api_client(api_llm):
    async with TutorAPIClient("http://testserver", transport=httpx.ASGITransport(app=app)) as client:
        session = ChatSession("english", client, language=Language.EN)
        reply = await session.send("Past tense of go?")

    assert reply.content == "Four."
    assert api_llm.calls[0][1].content == "Past tense of go?"
