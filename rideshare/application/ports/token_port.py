from __future__ import annotations

from datetime import datetime
from typing import Protocol

from rideshare.application.dto.auth import AccessTokenPayload
from rideshare.domain.entities.identity import IdentityKind


class TokenPort(Protocol):
    def create_access_token(
        self,
        *,
        identity_id: str,
        kind: IdentityKind,
        now: datetime,
    ) -> tuple[str, datetime]:
        ...

    def decode_access_token(self, *, token: str, now: datetime | None = None) -> AccessTokenPayload:
        ...
