from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from rideshare.domain.entities.identity import AuthProvider, IdentityKind


@dataclass(frozen=True)
class IdentityOutput:
    id: str
    kind: IdentityKind
    name: str
    email: str
    phone_number: str
    auth_provider: AuthProvider


@dataclass(frozen=True)
class RegisterIdentityInput:
    kind: IdentityKind
    name: str
    email: str
    phone_number: str
    password: str


@dataclass(frozen=True)
class RegisterIdentityOutput:
    user: IdentityOutput


@dataclass(frozen=True)
class LoginLocalInput:
    kind: IdentityKind
    email: str
    password: str


@dataclass(frozen=True)
class LoginGoogleInput:
    kind: IdentityKind
    id_token: str


@dataclass(frozen=True)
class AuthTokenOutput:
    user: IdentityOutput
    access_token: str
    access_expires_at: datetime


@dataclass(frozen=True)
class AccessTokenPayload:
    identity_id: str
    kind: IdentityKind


@dataclass(frozen=True)
class FederatedIdentityInfo:
    subject: str
    email: str
    email_verified: bool
    name: str | None
