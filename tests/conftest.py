import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine

from rps_api.db import build_session_factory
from rps_api.domain.game_rules import FixedMoveGenerator
from rps_api.main import create_app
from rps_api.models.schemas import Base


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'rps_test.sqlite3'}"


@pytest.fixture
async def session_factory(database_url):
    engine = create_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest.fixture
def client(database_url):
    app = create_app(
        move_generator=FixedMoveGenerator("rock"),
        engine=create_async_engine(database_url),
    )
    with TestClient(app) as test_client:
        yield test_client
