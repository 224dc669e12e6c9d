from __future__ import annotations

from typing import Protocol

from rideshare.application.dto.auth import FederatedIdentityInfo


class FederatedIdentityPort(Protocol):
    def verify_id_token(self, *, id_token: str) -> FederatedIdentityInfo:
        ...
