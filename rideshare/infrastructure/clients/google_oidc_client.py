from __future__ import annotations

import logging

from google.auth.transport import requests
from google.oauth2 import id_token

from rideshare.application.dto.auth import FederatedIdentityInfo
from rideshare.application.ports.federated_identity_port import FederatedIdentityPort
from rideshare.domain.exceptions import InvalidAssertionError


logger = logging.getLogger(__name__)


class GoogleOidcClient(FederatedIdentityPort):
    """Checks Google ID tokens against the configured OAuth client id.

    Only signature, audience and expiry are enforced here. Whether an
    unverified email may sign in is decided by the login use case.
    """

    def __init__(self, *, client_id: str):
        self._client_id = client_id

    def verify_id_token(self, *, id_token: str) -> FederatedIdentityInfo:
        try:
            claims = id_token_verify(token=id_token, audience=self._client_id)
        except Exception as exc:
            logger.warning("google_oidc_client: verification_failed error=%s", exc)
            raise InvalidAssertionError("Invalid Google id_token.") from exc

        subject = claims.get("sub")
        email = claims.get("email")
        if not subject or not email:
            logger.warning(
                "google_oidc_client: missing_claims has_sub=%s has_email=%s",
                bool(subject),
                bool(email),
            )
            raise InvalidAssertionError("Google id_token missing required claims.")

        name = claims.get("name")
        return FederatedIdentityInfo(
            subject=str(subject),
            email=str(email),
            email_verified=_is_true_claim(claims.get("email_verified")),
            name=name if isinstance(name, str) else None,
        )


def _is_true_claim(value) -> bool:
    # Google has sent email_verified both as a JSON bool and as a string.
    if isinstance(value, str):
        return value.lower() == "true"
    return value is True


def id_token_verify(*, token: str, audience: str) -> dict:
    return id_token.verify_oauth2_token(token, requests.Request(), audience)
