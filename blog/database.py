import logging

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase

from blog.config import settings
from blog.middleware import install_query_counter

logger = logging.getLogger(__name__)

# Module-level engine; tests point get_db at their own engine instead.
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

install_query_counter(engine)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db():
    """
    Request-scoped session.  Commits when the handler returns, rolls back
    and re-raises on any error so store failures reach the caller intact.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except HTTPException:
            # Handler-level responses such as 404 are not store failures.
            await session.rollback()
            raise
        except Exception as exc:
            logger.warning("Rolling back request session: %s", exc)
            await session.rollback()
            raise
