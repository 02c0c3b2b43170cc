import os
import tempfile

TEST_DIR = os.path.join(tempfile.gettempdir(), 'boardgames-tests')
os.makedirs(TEST_DIR, exist_ok=True)

os.environ['DATABASE_URL'] = f"sqlite+aiosqlite:///{os.path.join(TEST_DIR, 'test.db')}"
os.environ['LOG_DIR'] = os.path.join(TEST_DIR, 'logs')

import pytest
from httpx import ASGITransport, AsyncClient

from boardgames.main import app
from boardgames.database import engine, new_async_session
from boardgames.seed import seed
from tests.seed_data import TEST_DATA


@pytest.fixture(autouse=True)
async def seeded_database():
    async with new_async_session() as session:
        await seed(session, TEST_DATA)
    yield
    await engine.dispose()


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as client:
        yield client


@pytest.fixture
async def session():
    async with new_async_session() as session:
        yield session
