from __future__ import annotations

from datetime import datetime, timezone

from rideshare.application.dto.auth import AuthTokenOutput, IdentityOutput
from rideshare.application.ports.token_port import TokenPort
from rideshare.domain.entities.identity import Identity


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_identity_output(identity: Identity) -> IdentityOutput:
    return IdentityOutput(
        id=identity.id,
        kind=identity.kind,
        name=identity.name,
        email=identity.email,
        phone_number=identity.phone_number,
        auth_provider=identity.auth_provider,
    )


def issue_token(*, identity: Identity, token_port: TokenPort) -> AuthTokenOutput:
    access_token, access_expires_at = token_port.create_access_token(
        identity_id=identity.id,
        kind=identity.kind,
        now=utcnow(),
    )
    return AuthTokenOutput(
        user=build_identity_output(identity),
        access_token=access_token,
        access_expires_at=access_expires_at,
    )
