from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        autocommit=False,
        class_=AsyncSession,
        autoflush=True,
        expire_on_commit=False,
        bind=engine,
    )


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """One session per request, taken from the app's session factory."""
    async with request.app.state.session_factory() as session:
        yield session
