"""
Pytest configuration and fixtures.
"""
import json
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from typing import AsyncGenerator, Callable, List
from pathlib import Path

from main import app
from medal_table.api.dependencies import get_medal_service
from medal_table.services.medal_service import MedalService


SAMPLE_COUNTRIES = [
    {"code": "USA", "gold": 9, "silver": 7, "bronze": 12},
    {"code": "NOR", "gold": 11, "silver": 5, "bronze": 10},
    {"code": "RUS", "gold": 13, "silver": 11, "bronze": 9},
]


@pytest.fixture
def sample_countries() -> List[dict]:
    return [dict(c) for c in SAMPLE_COUNTRIES]


@pytest.fixture
def write_dataset(tmp_path: Path) -> Callable[[object], Path]:
    """Write a dataset file and return its path. Strings are written verbatim."""
    def _write(payload, name: str = "medals.json") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def use_dataset(write_dataset):
    """Point the API at a temporary dataset for the duration of a test."""
    def _use(payload) -> Path:
        path = write_dataset(payload)
        app.dependency_overrides[get_medal_service] = lambda: MedalService(path)
        return path
    yield _use
    app.dependency_overrides.pop(get_medal_service, None)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest_asyncio.fixture
async def test_client() -> AsyncGenerator[AsyncClient, None]:
    """Async test HTTP client for the FastAPI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
