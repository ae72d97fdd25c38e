# study_bot/db/models.py
from sqlalchemy import Column, DateTime, Enum, Integer, String, Text
from sqlalchemy.sql import func

from .session import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    open_id = Column("openId", String(64), nullable=False, unique=True)
    name = Column(Text)
    email = Column(String(320))
    login_method = Column("loginMethod", String(64))
    role = Column(Enum("user", "admin", name="user_role"), nullable=False, default="user", server_default="user")
    created_at = Column("createdAt", DateTime, nullable=False, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
    last_signed_in = Column("lastSignedIn", DateTime, nullable=False, server_default=func.now())
