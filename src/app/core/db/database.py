import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.ext.asyncio.session import AsyncSession
from sqlalchemy.orm import DeclarativeBase

from ..config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


# Database selection - use Postgres if configured, otherwise SQLite
if settings.POSTGRES_URL:
    DATABASE_URL = settings.POSTGRES_URL
    logger.info("Using PostgreSQL database: %s", DATABASE_URL.split("@")[-1])

    async_engine = create_async_engine(
        DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        future=True,
        pool_pre_ping=True,
        pool_recycle=300,
    )
else:
    DATABASE_URL = f"{settings.SQLITE_ASYNC_PREFIX}{settings.SQLITE_URI}"
    logger.info("Using SQLite database: %s", DATABASE_URL)

    async_engine = create_async_engine(
        DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        future=True,
        connect_args={"check_same_thread": False},
    )

local_session = async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


async def async_get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to yield an asynchronous database session.
    The session is automatically closed upon exiting the context.
    """
    async with local_session() as db:
        yield db


async def create_tables() -> None:
    # Import models so every table is registered on Base.metadata
    from ...models import Annotation, Model, User  # noqa: F401

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
