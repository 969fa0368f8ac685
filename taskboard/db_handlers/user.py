from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taskboard.db_handlers.base import BaseDBHandler, check_local_db
from taskboard.models.user import User
from taskboard.utils.logger import setup_logger

logger = setup_logger("db_handlers.user")


class UserDBHandler(BaseDBHandler[User]):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        super().__init__(User, session_factory)

    @check_local_db
    async def get_user_by_username(
        self, username: str, *, db: AsyncSession = None
    ) -> User | None:
        """Get a user by username."""
        try:
            stmt = select(User).filter(User.username == username)
            result = await db.execute(stmt)
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving user by username '{username}': {e}")
            raise

    @check_local_db
    async def get_admin_by_username(
        self, username: str, *, db: AsyncSession = None
    ) -> User | None:
        """Get a user by username only if it carries the admin flag."""
        return await self.get_by_attributes(db=db, username=username, is_admin=True)

    @check_local_db
    async def promote_to_admin(self, username: str, *, db: AsyncSession = None) -> User:
        """Set the admin flag on a user, creating the user first if needed."""
        user = await self.get_user_by_username(username, db=db)
        if user is None:
            logger.info(f"Creating user '{username}' for admin promotion")
            return await self.create({"username": username, "is_admin": True}, db=db)
        return await self.update(user, {"is_admin": True}, db=db)
