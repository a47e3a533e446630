from __future__ import annotations

import os

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.securehub.securehub.container import build_container
from src.securehub.securehub.core.constants import NETWORK_CONFIG_TABLE, USERS_TABLE
from src.securehub.securehub.main import create_app
from tests.fakes import ADMIN_ROW, STAFF_ROW, FakeLookup, InMemoryStore


@pytest.fixture
def fixed_now_ms() -> int:
    # 2026-02-02 08:30:00 UTC
    return 1770021000000


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore(
        {
            USERS_TABLE: [ADMIN_ROW, STAFF_ROW],
            NETWORK_CONFIG_TABLE: [{"id": 1, "whitelistedIps": ["10.0.0.5"]}],
        }
    )


@pytest.fixture
def lookup() -> FakeLookup:
    return FakeLookup("10.0.0.5")


@pytest.fixture
def container(store, lookup):
    return build_container(store=store, lookup=lookup)


@pytest.fixture
def client(container):
    app = create_app(container)
    return app.test_client()
