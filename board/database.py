from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase

from board.config import settings

# Module-level engine variable allows tests to override with a test engine.
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db():
    # Reads never commit; closing the session ends the implicit read transaction.
    async with async_session() as session:
        yield session


@asynccontextmanager
async def transaction(session: AsyncSession):
    """
    Unit-of-work scope for a single mutating operation.

    Commits when the block exits normally; rolls back and re-raises on
    any exception so that either every store effect of the operation is
    kept or none is.
    """
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
