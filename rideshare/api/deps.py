from __future__ import annotations

from enum import Enum
from functools import lru_cache

from fastapi import Depends, Header, HTTPException

from rideshare.application.dto.auth import AccessTokenPayload
from rideshare.application.ports.token_port import TokenPort
from rideshare.application.use_cases.get_profile import GetProfileUseCase
from rideshare.application.use_cases.list_join_requests import (
    ListJoinRequestsUseCase,
    ListMyJoinRequestsUseCase,
)
from rideshare.application.use_cases.login_google import LoginGoogleUseCase
from rideshare.application.use_cases.login_local import LoginLocalUseCase
from rideshare.application.use_cases.register_identity import RegisterIdentityUseCase
from rideshare.application.use_cases.update_profile import UpdateProfileUseCase
from rideshare.domain.entities.identity import IdentityKind
from rideshare.domain.exceptions import AuthError
from rideshare.infrastructure.avatar.data_uri_renderer import DataUriAvatarRenderer
from rideshare.infrastructure.clients.google_oidc_client import GoogleOidcClient
from rideshare.infrastructure.db.engine import get_engine
from rideshare.infrastructure.db.repositories.identity_repository import SqlIdentityRepository
from rideshare.infrastructure.db.repositories.rides_repository import SqlRidesRepository
from rideshare.infrastructure.security.password_hasher import PasswordHasher
from rideshare.infrastructure.security.token_service import JwtTokenService
from rideshare.shared.config import get_settings


class IdentityKindPath(str, Enum):
    passengers = "passengers"
    drivers = "drivers"


_KIND_BY_PATH: dict[IdentityKindPath, IdentityKind] = {
    IdentityKindPath.passengers: "passenger",
    IdentityKindPath.drivers: "driver",
}


def to_identity_kind(kind: IdentityKindPath) -> IdentityKind:
    return _KIND_BY_PATH[kind]


def _get_db_engine():
    settings = get_settings()
    if not settings.postgres_dsn:
        raise HTTPException(status_code=500, detail="POSTGRES_DSN is required.")
    return get_engine(settings.postgres_dsn)


def _get_identity_repository() -> SqlIdentityRepository:
    return SqlIdentityRepository(_get_db_engine())


def _get_rides_repository() -> SqlRidesRepository:
    return SqlRidesRepository(_get_db_engine())


@lru_cache(maxsize=1)
def _get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def _get_google_oidc_client() -> GoogleOidcClient:
    settings = get_settings()
    if not settings.google_client_id:
        raise HTTPException(status_code=500, detail="GOOGLE_CLIENT_ID is required.")
    return GoogleOidcClient(client_id=settings.google_client_id)


@lru_cache(maxsize=1)
def get_token_service() -> JwtTokenService:
    settings = get_settings()
    if not settings.access_token_secret:
        raise HTTPException(status_code=500, detail="ACCESS_TOKEN_SECRET is required.")
    return JwtTokenService(
        secret=settings.access_token_secret,
        access_ttl_hours=settings.access_token_ttl_hours,
    )


def get_register_identity_use_case() -> RegisterIdentityUseCase:
    return RegisterIdentityUseCase(
        identity_port=_get_identity_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_login_local_use_case(
    token_port: TokenPort = Depends(get_token_service),
) -> LoginLocalUseCase:
    return LoginLocalUseCase(
        identity_port=_get_identity_repository(),
        password_hasher=_get_password_hasher(),
        token_port=token_port,
    )


def get_login_google_use_case(
    token_port: TokenPort = Depends(get_token_service),
) -> LoginGoogleUseCase:
    return LoginGoogleUseCase(
        identity_port=_get_identity_repository(),
        federated_identity_port=_get_google_oidc_client(),
        password_hasher=_get_password_hasher(),
        token_port=token_port,
    )


def get_list_join_requests_use_case() -> ListJoinRequestsUseCase:
    return ListJoinRequestsUseCase(rides_port=_get_rides_repository())


def get_list_my_join_requests_use_case() -> ListMyJoinRequestsUseCase:
    return ListMyJoinRequestsUseCase(
        identity_port=_get_identity_repository(),
        list_join_requests_use_case=get_list_join_requests_use_case(),
    )


def get_get_profile_use_case() -> GetProfileUseCase:
    return GetProfileUseCase(
        identity_port=_get_identity_repository(),
        rides_port=_get_rides_repository(),
        avatar_renderer=DataUriAvatarRenderer(),
        list_join_requests_use_case=get_list_join_requests_use_case(),
    )


def get_update_profile_use_case() -> UpdateProfileUseCase:
    return UpdateProfileUseCase(
        identity_port=_get_identity_repository(),
        password_hasher=_get_password_hasher(),
    )


def get_access_token_payload(
    authorization: str | None = Header(default=None),
    token_port: TokenPort = Depends(get_token_service),
) -> AccessTokenPayload:
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authorization header.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=401,
            detail="Invalid authorization header.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token:
        raise HTTPException(
            status_code=401,
            detail="Missing access token.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return token_port.decode_access_token(token=token)
    except AuthError as exc:
        raise HTTPException(
            status_code=401,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def get_current_identity(
    kind: IdentityKindPath,
    payload: AccessTokenPayload = Depends(get_access_token_payload),
) -> AccessTokenPayload:
    if payload.kind != to_identity_kind(kind):
        raise HTTPException(status_code=403, detail=f"Access token is not valid for {kind.value}.")
    return payload


def get_current_passenger(
    payload: AccessTokenPayload = Depends(get_access_token_payload),
) -> AccessTokenPayload:
    if payload.kind != "passenger":
        raise HTTPException(status_code=403, detail="Access token is not valid for passengers.")
    return payload
