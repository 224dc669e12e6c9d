from __future__ import annotations

import pytest

from factories import FakeIdentityPort, FakePasswordHasher, FakeRidesPort, FakeTokenPort


@pytest.fixture
def identity_port() -> FakeIdentityPort:
    return FakeIdentityPort()


@pytest.fixture
def rides_port() -> FakeRidesPort:
    return FakeRidesPort()


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def token_port() -> FakeTokenPort:
    return FakeTokenPort()
