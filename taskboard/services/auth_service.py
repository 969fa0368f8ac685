"""
Username registration and sign-in.

There are no credentials: signing in only proves that a username was
registered. Admin sign-in additionally requires the user's admin flag.
"""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from taskboard.db_handlers import UserDBHandler
from taskboard.errors import (
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from taskboard.utils.logger import setup_logger

logger = setup_logger("auth_service")


class AuthService:
    def __init__(self, user_db_handler: UserDBHandler):
        self.user_db_handler = user_db_handler

    async def register(self, username: str | None) -> None:
        """Create a user for ``username``.

        Raises:
            ValidationError: the username is missing or empty.
            ConflictError: the username is already taken, including when a
                concurrent registration wins the race to the unique index.
            InternalError: any other store failure.
        """
        if not username:
            raise ValidationError("Username required")

        try:
            existing_user = await self.user_db_handler.get_user_by_username(username)
            if existing_user:
                logger.warning(f"Registration rejected, user '{username}' exists")
                raise ConflictError("User already exists")

            await self.user_db_handler.create({"username": username})
        except IntegrityError as e:
            logger.warning(f"Registration of '{username}' lost a race: {e}")
            raise ConflictError("User already exists") from e
        except SQLAlchemyError as e:
            logger.error(f"Register failed for '{username}': {e}", exc_info=True)
            raise InternalError("Register failed") from e

        logger.info(f"Registered user '{username}'")

    async def signin(self, username: str | None) -> None:
        if not username:
            raise NotFoundError("User not found")

        try:
            user = await self.user_db_handler.get_user_by_username(username)
        except SQLAlchemyError as e:
            logger.error(f"Signin failed for '{username}': {e}", exc_info=True)
            raise InternalError("Signin failed") from e

        if not user:
            raise NotFoundError("User not found")

    async def admin_signin(self, username: str | None) -> None:
        if not username:
            raise ForbiddenError("Not an admin")

        try:
            admin = await self.user_db_handler.get_admin_by_username(username)
        except SQLAlchemyError as e:
            logger.error(f"Admin login failed for '{username}': {e}", exc_info=True)
            raise InternalError("Admin login failed") from e

        if not admin:
            logger.warning(f"Admin sign-in refused for '{username}'")
            raise ForbiddenError("Not an admin")
