import contextlib
from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.page.dependencies import get_session_store
from src.page.tests.inmemory import create_test_store


@pytest.fixture
def client_factory():
    """Build a test client with the given dependency overrides."""

    @contextlib.asynccontextmanager
    async def _client_factory(overrides: dict | None = None) -> AsyncIterator[AsyncClient]:
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return _client_factory


@pytest.fixture
async def session_store():
    """In-memory session store whose countdowns are stopped after the test."""
    store = create_test_store()
    yield store
    store.close_all()


@pytest.fixture
async def client(client_factory, session_store):
    """Create a test client backed by an in-memory session store."""
    async with client_factory({get_session_store: lambda: session_store}) as ac:
        yield ac
