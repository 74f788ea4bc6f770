from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from roster_server.config import Settings
from roster_server.server import create_app
from roster_server.state import RosterStore


@pytest.fixture
def store() -> RosterStore:
    return RosterStore()


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def client(settings: Settings, store: RosterStore) -> TestClient:
    return TestClient(create_app(settings, store))
