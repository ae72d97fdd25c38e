# study_bot/schemas/auth.py
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from ..utils.case_utils import to_camel


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    id: int
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Role = Role.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    last_signed_in: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class UserUpsert(BaseModel):
    """Fields left unset are not written on update."""
    open_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    login_method: Optional[str] = None
    role: Optional[Role] = None
    last_signed_in: Optional[datetime] = None


class SessionPayload(BaseModel):
    open_id: str
    app_id: str
    name: str


class OAuthUserInfo(BaseModel):
    open_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    platform: Optional[str] = None
    login_method: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"


class LogoutResponse(BaseModel):
    success: bool = True
