from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from rps_api.load_secrets import database_url


def build_engine(url: str) -> AsyncEngine:
    if url.startswith("postgresql"):
        return create_async_engine(url, pool_size=20, max_overflow=20, pool_pre_ping=True)
    return create_async_engine(url, echo=False)


engine = build_engine(database_url)
