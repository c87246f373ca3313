"""Shared pytest fixtures for offline and live tests."""

import os
import logging

import httpx
import pytest
from dotenv import load_dotenv

from factories import load_fixture
from notion_typed import NotionApi

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)


@pytest.fixture
def fixture():
    """Loader for JSON documents under tests/fixtures."""
    return load_fixture


@pytest.fixture
def mock_api():
    """Build a NotionApi whose requests are answered by ``handler``.

    The handler receives each httpx.Request and returns an httpx.Response.
    Every request is also recorded on ``api.requests`` for assertions.
    """

    def build(handler) -> NotionApi:
        requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(record))
        api = NotionApi("secret_test_token", http_client=client)
        api.requests = requests
        return api

    return build


@pytest.fixture(scope="session")
def live_api():
    """Client against the real API; skips when no token is configured."""
    token = os.getenv("NOTION_API_TOKEN")
    if not token:
        pytest.skip("NOTION_API_TOKEN not set - skipping live tests")
    logger.info("Running live tests against api.notion.com")
    return token
