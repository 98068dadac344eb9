"""Root conftest — shared test configuration.

Invariants:
    - Service env vars cleared so defaults are what tests observe
    - get_settings cache reset around every test
    - client app built per test, after the reset, so shell CORS settings do not leak in
"""

import pytest
from httpx import ASGITransport, AsyncClient

from hello_service.config import get_settings
from hello_service.main import create_app


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for var in ("HOST", "PORT", "CORS_ORIGINS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"HELLO_SERVICE_{var}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client():
    """FastAPI test client over ASGI (no network, no lifespan)."""
    async with AsyncClient(
        transport=ASGITransport(app=create_app()), base_url="http://test",
    ) as c:
        yield c
