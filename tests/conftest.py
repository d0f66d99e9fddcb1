import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from joblist.main import create_app
from joblist.services.engine_client import EngineClient
from joblist.services.mock.engine_service import MockEngineService

ENGINE_URL = "http://localhost:1337"

FIRST_JOB_ID = "3f1c2a4e-8a9b-4c5d-9e0f-1a2b3c4d5e6f"
SECOND_JOB_ID = "9d8e7f60-5a4b-4c3d-8e2f-0a1b2c3d4e5f"


@pytest.fixture
def engine_app():
    """Mock engine seeded with the sample jobs."""
    return create_app(MockEngineService())


@pytest_asyncio.fixture
async def client(engine_app):
    async with AsyncClient(
        transport=ASGITransport(app=engine_app), base_url=ENGINE_URL
    ) as c:
        yield c


@pytest.fixture
def engine_client(engine_app):
    """EngineClient talking to the mock engine in-process."""
    with TestClient(engine_app, base_url=ENGINE_URL) as http:
        yield EngineClient(base_url=ENGINE_URL, client=http)


@pytest.fixture
def stub_engine():
    """Build an EngineClient whose requests are answered by ``handler``."""
    clients: list[EngineClient] = []

    def _make(handler) -> EngineClient:
        http = httpx.Client(base_url=ENGINE_URL, transport=httpx.MockTransport(handler))
        engine = EngineClient(base_url=ENGINE_URL, client=http)
        clients.append(engine)
        return engine

    yield _make
    for engine in clients:
        engine.close()
