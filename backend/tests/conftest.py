"""Shared fixtures: sample PDF, stub client, app factory."""

import pytest
from fastapi.testclient import TestClient

from config import Settings
from helpers import StubCompletionClient, build_pdf
from main import create_app


@pytest.fixture
def resume_pdf() -> bytes:
    return build_pdf([
        ["Jane Smith", "Senior Software Engineer"],
        ["Skills: Python, Docker, PostgreSQL", "Built REST APIs with FastAPI"],
    ])


@pytest.fixture
def stub_client() -> StubCompletionClient:
    return StubCompletionClient()


@pytest.fixture
def make_client():
    """Build a TestClient around a fresh app with the given settings and stub."""

    def _make(completion_client=None, **overrides) -> TestClient:
        settings = Settings(**overrides)
        app = create_app(settings, completion_client or StubCompletionClient())
        return TestClient(app)

    return _make


@pytest.fixture
def client(make_client, stub_client) -> TestClient:
    return make_client(stub_client)
