from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from taskboard import models  # noqa: F401
from taskboard.config import Settings
from taskboard.models.base import Base
from taskboard.utils.logger import setup_logger

logger = setup_logger("db")

SUPPORTED_URL_PREFIXES = ("postgresql+asyncpg://", "sqlite+aiosqlite://")


def normalize_database_url(url: str) -> str:
    """Rewrite plain Postgres URLs to the asyncpg driver and reject anything else."""
    if url.startswith(SUPPORTED_URL_PREFIXES):
        return url
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return url.replace(prefix, "postgresql+asyncpg://", 1)
    raise ValueError(f"Unsupported DATABASE_URL prefix: {url}")


def create_engine_from_settings(app_settings: Settings) -> AsyncEngine:
    """Create the process-wide async engine described by the settings."""
    url = normalize_database_url(app_settings.database_url)
    logger.debug(f"Application DB URL: {url}")

    if url.startswith("postgresql+asyncpg://"):
        return create_async_engine(
            url,
            pool_pre_ping=True,
            pool_size=10,
            max_overflow=20,
            pool_timeout=60,
            pool_recycle=300,
            echo=app_settings.db_echo,
            connect_args={"timeout": 30},
        )
    return create_async_engine(url, echo=app_settings.db_echo)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create the users and tasks tables if they do not exist."""
    logger.debug(
        f"Tables registered in Base.metadata: {list(Base.metadata.tables.keys())}"
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema initialized.")


async def check_db_connection(engine: AsyncEngine) -> bool:
    """Return True when a trivial query succeeds against the database."""
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar_one() == 1
    except Exception as e:
        logger.error(f"Database connectivity check failed: {e}", exc_info=True)
        return False


async def close_db(engine: AsyncEngine) -> None:
    """Closes database connections."""
    logger.info("Closing database connections.")
    await engine.dispose()
    logger.info("Database connections closed.")
