"""Pytest fixtures for PTP stats tests."""

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from ptp_stats.config import get_settings
from ptp_stats.reporter import JSONStats, create_app


@pytest.fixture()
def stats() -> JSONStats:
    """Return a fresh reporter per test so counters never leak between tests."""
    return JSONStats(host="127.0.0.1")


@pytest.fixture()
def app(stats: JSONStats) -> FastAPI:
    return create_app(stats)


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an `httpx.AsyncClient` wired to the reporting app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
