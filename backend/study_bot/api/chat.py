# study_bot/api/chat.py
from fastapi import APIRouter, Depends

from ..dependencies import get_chat_service
from ..schemas.chat import ChatRequest, ChatResponse
from ..services.chat import ChatService

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/chat")
async def chat(
        request: ChatRequest,
        chat_service: ChatService = Depends(get_chat_service)
) -> ChatResponse:
    return await chat_service.chat(request)
