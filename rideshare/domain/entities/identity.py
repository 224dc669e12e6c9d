from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


IdentityKind = Literal["passenger", "driver"]
AuthProvider = Literal["local", "google"]

IDENTITY_KINDS: tuple[IdentityKind, ...] = ("passenger", "driver")


@dataclass(frozen=True)
class Avatar:
    data: bytes
    content_type: str


@dataclass(frozen=True)
class Identity:
    id: str
    kind: IdentityKind
    name: str
    email: str
    phone_number: str
    password_hash: str | None
    auth_provider: AuthProvider
    avatar: Avatar | None
    created_at: datetime
    updated_at: datetime
