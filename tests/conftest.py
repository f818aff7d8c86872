import pytest
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient

from factories import TEST_ENV, FakeCurrencies
from namespace_api import rpc
from namespace_api.data_access import CurrenciesDataAccess
from namespace_api.main import app as fastapi_app


@pytest.fixture(autouse=True, scope="session")
def anyio_backend():
    return ("asyncio", {"use_uvloop": True})


@pytest.fixture
def fake_currencies():
    return FakeCurrencies()


@pytest.fixture
async def async_client(fake_currencies, monkeypatch):
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)
    rpc.reset_client()
    fastapi_app.dependency_overrides[CurrenciesDataAccess] = lambda: fake_currencies
    try:
        async with LifespanManager(fastapi_app):
            async with AsyncClient(
                transport=ASGITransport(app=fastapi_app),
                base_url="http://test",
            ) as client:
                yield client
    finally:
        fastapi_app.dependency_overrides.clear()
