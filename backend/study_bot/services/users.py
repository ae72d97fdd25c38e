# study_bot/services/users.py
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.models import UserModel
from ..schemas.auth import Role, User, UserUpsert

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: Optional[AsyncSession], owner_open_id: str = ""):
        self.db = db
        self.owner_open_id = owner_open_id

    async def upsert_user(self, user: UserUpsert) -> Optional[User]:
        if not user.open_id:
            raise ValueError("User openId is required for upsert")

        if self.db is None:
            logger.warning("[Database] Cannot upsert user: database not available")
            return None

        values = user.model_dump(exclude_unset=True, exclude={"open_id"})
        if values.get("role") is None:
            values.pop("role", None)
            if user.open_id == self.owner_open_id:
                values["role"] = Role.ADMIN
        if "role" in values:
            values["role"] = Role(values["role"]).value
        if values.get("last_signed_in") is None:
            values["last_signed_in"] = datetime.utcnow()

        try:
            result = await self.db.execute(select(UserModel).filter(UserModel.open_id == user.open_id))
            model = result.scalar_one_or_none()

            if not model:
                model = UserModel(open_id=user.open_id, **values)
                self.db.add(model)
            else:
                for key, value in values.items():
                    setattr(model, key, value)

            await self.db.commit()
            await self.db.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"[Database] Failed to upsert user: {e}")
            await self.db.rollback()
            raise

        return User.model_validate(model)

    async def get_user_by_open_id(self, open_id: str) -> Optional[User]:
        if self.db is None:
            logger.warning("[Database] Cannot get user: database not available")
            return None

        result = await self.db.execute(select(UserModel).filter(UserModel.open_id == open_id))
        model = result.scalar_one_or_none()
        return User.model_validate(model) if model else None
