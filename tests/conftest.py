import httpx
import pytest
from asgi_lifespan import LifespanManager

from aicloset.main import app
from aicloset.recs.history import InMemoryHistoryStore
from aicloset.routers.recommendations import get_recs_service
from aicloset.services.feedback import feedback_service
from aicloset.services.recs import RecommendationService


@pytest.fixture
def history_store():
    return InMemoryHistoryStore()


@pytest.fixture(autouse=True)
def override_services(history_store):
    service = RecommendationService(store=history_store, seed=7)
    app.dependency_overrides[get_recs_service] = lambda: service
    feedback_service.clear()
    yield service
    app.dependency_overrides.pop(get_recs_service, None)
    feedback_service.clear()


@pytest.fixture
async def client():
    async with LifespanManager(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
