"""
Shared fixtures and utilities for Deezer service tests.
"""

import asyncio
import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from api.deezer.client import DeezerClient
from api.deezer.config import deezer_config


@pytest.fixture(autouse=True)
async def delay_between_integration_tests(request):
    """Add a short delay after each integration test to stay clear of the API quota."""
    if "integration" in request.keywords:
        yield
        await asyncio.sleep(0.5)
    else:
        yield


@pytest.fixture(autouse=True)
def reset_deezer_config(monkeypatch):
    """Each test resolves configuration from its own environment."""
    for name in ("DEEZER_BASE_URL", "DEEZER_TIMEOUT", "DEEZER_USER_AGENT", "DEEZER_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)
    deezer_config.reset()
    yield
    deezer_config.reset()


# Load fixtures from JSON files
FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(filename: str) -> dict:
    """Load a fixture from JSON file.

    Args:
        filename: Name of the fixture file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If fixture file doesn't exist
    """
    fixture_path = FIXTURES_DIR / filename
    if not fixture_path.exists():
        raise FileNotFoundError(
            f"Fixture file not found: {fixture_path}\n"
            f"Create fixtures from real API responses for testing."
        )

    with open(fixture_path) as f:
        return json.load(f)


def make_response(payload: Any = None, status: int = 200) -> AsyncMock:
    """Build a mocked aiohttp response."""
    response = AsyncMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.read = AsyncMock(return_value=b"")
    return response


def make_session(*responses: AsyncMock) -> MagicMock:
    """Build a mocked aiohttp session answering GETs with ``responses`` in order."""
    session = MagicMock()
    session.close = AsyncMock()
    contexts = []
    for response in responses:
        context = MagicMock()
        context.__aenter__ = AsyncMock(return_value=response)
        context.__aexit__ = AsyncMock(return_value=False)
        contexts.append(context)
    if len(contexts) == 1:
        session.get.return_value = contexts[0]
    else:
        session.get.side_effect = contexts
    return session


def requested_url(session: MagicMock, call: int = -1) -> str:
    return session.get.call_args_list[call].args[0]


def requested_params(session: MagicMock, call: int = -1) -> dict | None:
    return session.get.call_args_list[call].kwargs.get("params")


@pytest.fixture
def album_payload():
    return load_fixture("album_302127.json")


@pytest.fixture
def artist_payload():
    return load_fixture("artist_27.json")


@pytest.fixture
def track_payload():
    return load_fixture("track_3135556.json")


@pytest.fixture
def playlist_payload():
    return load_fixture("playlist_908622995.json")


@pytest.fixture
def no_data_payload():
    """In-body error Deezer sends with HTTP 200 for an unknown id."""
    return {"error": {"type": "DataException", "message": "no data", "code": 800}}


@pytest.fixture
def quota_payload():
    return {"error": {"type": "Exception", "message": "Quota limit exceeded", "code": 4}}


@pytest.fixture
def deezer_client_factory():
    """Create DeezerClient instances bound to mocked sessions."""

    def factory(*responses: AsyncMock) -> tuple[DeezerClient, MagicMock]:
        session = make_session(*responses)
        return DeezerClient(session=session), session

    return factory
