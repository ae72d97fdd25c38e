"""
Relay behaviour: subject lookup, prompt injection, concise truncation and
error conversion.
"""

import json

import httpx
import pytest

from study_bot.schemas.chat import ChatRequest
from study_bot.schemas.subject import Language, SubjectId
from study_bot.services.chat import ChatService, truncate_reply
from study_bot.services.llm.base import (
    InvalidResponseError,
    LLMConfigurationError,
    LLMRequestError,
)
from study_bot.services.llm.gemini import GeminiService
from study_bot.services.prompts import CONCISE_INSTRUCTIONS
from study_bot.utils.errors import AIResponseError, SubjectNotFoundError

from conftest import FakeLLMService


def _request(subject_id="mathematics", message="What is 2+2?", language="en", concise=False):
    return ChatRequest(subject_id=subject_id, message=message, language=language, concise=concise)


@pytest.mark.asyncio
@pytest.mark.parametrize("subject_id", [s.value for s in SubjectId])
async def test_every_known_subject_succeeds(subject_id):
    llm = FakeLLMService(content="Hello student")
    response = await ChatService(llm).chat(_request(subject_id=subject_id))
    assert response.success is True
    assert response.reply == "Hello student"
    assert len(llm.calls) == 1


@pytest.mark.asyncio
async def test_unknown_subject_fails_before_any_llm_call():
    llm = FakeLLMService()
    with pytest.raises(SubjectNotFoundError):
        await ChatService(llm).chat(_request(subject_id="unknown", message="hi"))
    assert llm.calls == []


@pytest.mark.asyncio
async def test_example_scenario_concise_short_reply():
    llm = FakeLLMService(content="The answer is 4.")
    response = await ChatService(llm).chat(_request(concise=True))
    assert response.model_dump() == {"reply": "The answer is 4.", "success": True}


@pytest.mark.asyncio
async def test_sends_system_then_user_message():
    llm = FakeLLMService()
    await ChatService(llm).chat(_request(subject_id="physics", message="  <b>why?</b> ", language="ar", concise=True))

    system, user = llm.calls[0]
    assert system.role == "system"
    assert system.content.endswith(CONCISE_INSTRUCTIONS[Language.AR])
    assert user.role == "user"
    assert user.content == "  <b>why?</b> "


@pytest.mark.asyncio
async def test_concise_long_reply_is_cut_to_300_chars_plus_marker():
    long_reply = "word " * 100
    llm = FakeLLMService(content=long_reply)
    response = await ChatService(llm).chat(_request(concise=True))
    assert response.reply == long_reply[:300] + "..."
    assert len(response.reply) == 303


@pytest.mark.asyncio
async def test_non_concise_reply_passes_through_unmodified():
    long_reply = "x" * 5000
    llm = FakeLLMService(content=long_reply)
    response = await ChatService(llm).chat(_request(concise=False))
    assert response.reply == long_reply


def test_truncate_reply_boundaries():
    assert truncate_reply("a" * 300) == "a" * 300
    assert truncate_reply("a" * 301) == "a" * 300 + "..."
    # mid-word cut is kept as is
    assert truncate_reply("abc def", limit=5) == "abc d..."


@pytest.mark.asyncio
async def test_empty_content_becomes_placeholder():
    response = await ChatService(FakeLLMService(content="")).chat(_request())
    assert response.reply == "No response received"


@pytest.mark.asyncio
async def test_structured_content_is_json_encoded():
    parts = [{"type": "text", "text": "hi"}]
    response = await ChatService(FakeLLMService(content=parts)).chat(_request())
    assert response.reply == '[{"type": "text", "text": "hi"}]'


@pytest.mark.asyncio
async def test_structured_content_is_not_truncated_in_concise_mode():
    parts = [{"type": "text", "text": "z" * 400}]
    response = await ChatService(FakeLLMService(content=parts)).chat(_request(concise=True))
    assert response.reply == json.dumps(parts)
    assert not response.reply.endswith("...")


@pytest.mark.asyncio
async def test_bad_usage_block_becomes_generic_ai_error():
    def handler(request):
        return httpx.Response(200, json={
            "choices": [{"message": {"content": "hi"}}],
            "usage": {"prompt_tokens": "n/a"}
        })

    llm = GeminiService(api_key="test-key", transport=httpx.MockTransport(handler))
    with pytest.raises(AIResponseError) as exc_info:
        await ChatService(llm).chat(_request())
    assert isinstance(exc_info.value.__cause__, InvalidResponseError)


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [
    LLMRequestError(500, "boom"),
    InvalidResponseError("Invalid response format from LLM API"),
])
async def test_llm_failures_become_generic_ai_error(error):
    with pytest.raises(AIResponseError) as exc_info:
        await ChatService(FakeLLMService(error=error)).chat(_request())
    assert exc_info.value.status_code == 502
    assert exc_info.value.error_message == "Failed to get AI response"
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_missing_api_key_fails_with_configuration_error_and_no_requests():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"content": "hi"}}]})

    llm = GeminiService(api_key="", transport=httpx.MockTransport(handler))
    with pytest.raises(AIResponseError) as exc_info:
        await ChatService(llm).chat(_request())

    assert isinstance(exc_info.value.__cause__, LLMConfigurationError)
    assert requests == []
