"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Every test gets a fresh service container with empty stores, cheap argon2
parameters and a clock it can move forward.
"""

import pytest
from datetime import datetime, timezone, timedelta

from shared.config import Settings
from api.dependencies import ServiceContainer, reset_container, set_container
from modules.accounts.passwords import CredentialHasher


class FakeClock:
    """Controllable time source."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


def make_test_settings(**overrides) -> Settings:
    """Settings with fast hashing and no demo account."""
    values = {
        "password_hash_time_cost": 1,
        "password_hash_memory_cost": 8,
        "password_hash_parallelism": 1,
        "seed_demo_account": False,
        "access_token_ttl_seconds": 3600,
        "texture_base_url": "https://textures.test",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    return make_test_settings()


@pytest.fixture
def hasher() -> CredentialHasher:
    """Cheap argon2 hasher for store-level tests."""
    return CredentialHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def container(settings, clock):
    """Install a fresh container for the test and remove it afterwards."""
    container = ServiceContainer(settings=settings, clock=clock)
    set_container(container)
    yield container
    reset_container()


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Never leak a container between tests."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def alice(container):
    """Registered user alice with one profile, AliceMC."""
    account = container.credentials.create("alice", "a@x.com", "secret1")
    profile = container.profiles.create(account.id, "AliceMC")
    return account, profile


@pytest.fixture
def client(container):
    """HTTP client against a fresh application bound to the test container."""
    from fastapi.testclient import TestClient
    from api.app import create_app

    return TestClient(create_app())
