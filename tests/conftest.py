import pytest
from httpx import AsyncClient, ASGITransport
from fastapi import FastAPI

from app.core.config import settings
from app.api.v1.router import api_router
from app.api.deps import get_store
from app.ai.flows import set_default_engine
from app.storage.memory import MemoryKeyValueStore
from tests.utils import FakeEngine


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def engine():
    fake = FakeEngine()
    set_default_engine(fake)
    yield fake
    set_default_engine(None)


@pytest.fixture
async def client(store, engine):
    # Fresh app without lifespan so no credential check or Redis is touched
    new_app = FastAPI()
    new_app.include_router(api_router, prefix=settings.API_V1_PREFIX)
    new_app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=new_app), base_url="http://test") as c:
        yield c


@pytest.fixture
def user_headers():
    return {"X-User-Id": "user-1"}
