from __future__ import annotations

from datetime import datetime
from typing import Protocol

from rideshare.domain.entities.identity import AuthProvider, Identity, IdentityKind


class IdentityPort(Protocol):
    def email_exists(self, *, email: str, exclude_identity_id: str | None = None) -> bool:
        ...

    def get_identity(self, *, kind: IdentityKind, identity_id: str) -> Identity | None:
        ...

    def get_identity_by_email(self, *, kind: IdentityKind, email: str) -> Identity | None:
        ...

    def find_identity_by_email(self, *, email: str) -> Identity | None:
        ...

    def create_identity(
        self,
        *,
        identity_id: str,
        kind: IdentityKind,
        name: str,
        email: str,
        phone_number: str,
        password_hash: str,
        auth_provider: AuthProvider,
        created_at: datetime,
    ) -> Identity:
        ...

    def update_identity(
        self,
        *,
        kind: IdentityKind,
        identity_id: str,
        name: str | None,
        phone_number: str | None,
        email: str | None,
        password_hash: str | None,
        updated_at: datetime,
    ) -> Identity:
        ...
