from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from factories import FakeFederatedIdentityPort
from rideshare.api.deps import (
    get_login_google_use_case,
    get_login_local_use_case,
    get_register_identity_use_case,
    get_token_service,
)
from rideshare.application.use_cases.login_google import LoginGoogleUseCase
from rideshare.application.use_cases.login_local import LoginLocalUseCase
from rideshare.application.use_cases.register_identity import RegisterIdentityUseCase
from rideshare.domain.exceptions import HashingError
from rideshare.infrastructure.security.token_service import JwtTokenService
from rideshare.main import app


ALICE = {
    "email": "a@b.com",
    "password": "password1",
    "name": "Alice",
    "phone_number": "1234567890",
}

token_service = JwtTokenService(secret="auth-router-secret-0123456789abcdef", access_ttl_hours=24)


class FailingPasswordHasher:
    def hash(self, plain_password: str) -> str:
        raise HashingError("Error occurred when hashing password.")

    def verify(self, plain_password: str, password_hash: str) -> bool:
        raise HashingError("Error occurred when checking password.")


@pytest.fixture
def client(identity_port, password_hasher):
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_register_identity_use_case] = lambda: RegisterIdentityUseCase(
        identity_port=identity_port,
        password_hasher=password_hasher,
    )
    app.dependency_overrides[get_login_local_use_case] = lambda: LoginLocalUseCase(
        identity_port=identity_port,
        password_hasher=password_hasher,
        token_port=token_service,
    )
    app.dependency_overrides[get_login_google_use_case] = lambda: LoginGoogleUseCase(
        identity_port=identity_port,
        federated_identity_port=FakeFederatedIdentityPort(),
        password_hasher=password_hasher,
        token_port=token_service,
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_register_then_duplicate_as_driver(client):
    first = client.post("/v1/passengers/register", json=ALICE)
    second = client.post("/v1/drivers/register", json=ALICE)

    assert first.status_code == 201
    assert first.json()["user"]["kind"] == "passenger"
    assert "password" not in first.json()["user"]
    assert second.status_code == 409
    assert "already exists" in second.json()["detail"]


def test_register_rejects_invalid_phone(client):
    response = client.post("/v1/passengers/register", json={**ALICE, "phone_number": "123"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid phone number"


def test_register_hashing_failure_is_opaque(client, identity_port):
    app.dependency_overrides[get_register_identity_use_case] = lambda: RegisterIdentityUseCase(
        identity_port=identity_port,
        password_hasher=FailingPasswordHasher(),
    )

    response = client.post("/v1/passengers/register", json=ALICE)

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"


def test_signin_returns_token_that_resolves_to_identity(client):
    registered = client.post("/v1/passengers/register", json=ALICE).json()["user"]

    response = client.post("/v1/passengers/signin", json={"email": "a@b.com", "password": "password1"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["token_type"] == "bearer"
    assert payload["user"]["id"] == registered["id"]
    decoded = token_service.decode_access_token(token=payload["access_token"])
    assert decoded.identity_id == registered["id"]
    assert decoded.kind == "passenger"


def test_signin_wrong_password_issues_no_token(client):
    client.post("/v1/passengers/register", json=ALICE)

    response = client.post("/v1/passengers/signin", json={"email": "a@b.com", "password": "password2"})

    assert response.status_code == 401
    assert response.json() == {"detail": "Wrong password"}


def test_signin_empty_input(client):
    response = client.post("/v1/passengers/signin", json={"email": "", "password": ""})

    assert response.status_code == 400


def test_google_signup_issues_token(client):
    response = client.post("/v1/drivers/google-signup", json={"id_token": "token-google"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["user"]["auth_provider"] == "google"
    assert payload["user"]["phone_number"] == ""
    assert token_service.decode_access_token(token=payload["access_token"]).kind == "driver"


def test_google_signup_failure_is_opaque(client):
    response = client.post("/v1/passengers/google-signup", json={"id_token": "forged"})

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_unknown_identity_kind_in_path(client):
    response = client.post("/v1/admins/register", json=ALICE)

    assert response.status_code == 422


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}
