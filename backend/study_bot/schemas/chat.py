# study_bot/schemas/chat.py
from pydantic import BaseModel

from .subject import Language
from ..utils.case_utils import to_camel


class ChatRequest(BaseModel):
    subject_id: str
    message: str
    language: Language
    concise: bool = False

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ChatResponse(BaseModel):
    reply: str
    success: bool
