from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from rideshare.application.dto.auth import AccessTokenPayload
from rideshare.application.ports.token_port import TokenPort
from rideshare.domain.entities.identity import IDENTITY_KINDS, IdentityKind
from rideshare.domain.exceptions import ExpiredTokenError, InvalidSignatureError, MalformedTokenError


class JwtTokenService(TokenPort):
    """Stateless HS256 access tokens.

    Tokens are not recorded anywhere, so one stays valid until its ``exp``
    even if the account changes in the meantime. A token is accepted at
    ``exp`` and rejected at any instant after it.
    """

    def __init__(
        self,
        *,
        secret: str,
        access_ttl_hours: int = 24,
    ):
        self._secret = secret
        self._access_ttl_hours = access_ttl_hours

    def create_access_token(
        self,
        *,
        identity_id: str,
        kind: IdentityKind,
        now: datetime,
    ) -> tuple[str, datetime]:
        # exp is signed with whole-second resolution; report that same instant.
        exp = (now + timedelta(hours=self._access_ttl_hours)).replace(microsecond=0)
        payload = {
            "sub": identity_id,
            "kind": kind,
            "type": "access",
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm="HS256")
        return token, exp

    def decode_access_token(self, *, token: str, now: datetime | None = None) -> AccessTokenPayload:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=["HS256"],
                options={"require": ["exp", "sub"], "verify_exp": False},
            )
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignatureError("Invalid token signature.") from exc
        except jwt.PyJWTError as exc:
            raise MalformedTokenError("Malformed access token.") from exc

        exp = payload["exp"]
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise MalformedTokenError("Malformed access token.")
        current = now or datetime.now(timezone.utc)
        if current.timestamp() > exp:
            raise ExpiredTokenError("Access token expired.")

        if payload.get("type") != "access":
            raise MalformedTokenError("Invalid token type.")

        identity_id = payload.get("sub")
        if not identity_id or not isinstance(identity_id, str):
            raise MalformedTokenError("Invalid token subject.")

        kind = payload.get("kind")
        if kind not in IDENTITY_KINDS:
            raise MalformedTokenError("Invalid token identity kind.")

        return AccessTokenPayload(identity_id=identity_id, kind=kind)
