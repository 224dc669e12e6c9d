from __future__ import annotations

import logging
import secrets
from uuid import uuid4

from rideshare.application.dto.auth import AuthTokenOutput, LoginGoogleInput
from rideshare.application.ports.federated_identity_port import FederatedIdentityPort
from rideshare.application.ports.identity_port import IdentityPort
from rideshare.application.ports.password_hasher_port import PasswordHasherPort
from rideshare.application.ports.token_port import TokenPort
from rideshare.domain.exceptions import InvalidAssertionError
from rideshare.domain.services.identity_rules import federated_display_name, normalize_email

from .auth_common import issue_token, utcnow


logger = logging.getLogger(__name__)


class LoginGoogleUseCase:
    def __init__(
        self,
        *,
        identity_port: IdentityPort,
        federated_identity_port: FederatedIdentityPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._identity_port = identity_port
        self._federated_identity_port = federated_identity_port
        self._password_hasher = password_hasher
        self._token_port = token_port

    def execute(self, command: LoginGoogleInput) -> AuthTokenOutput:
        federated = self._federated_identity_port.verify_id_token(id_token=command.id_token)
        email = normalize_email(federated.email)
        if not federated.email_verified:
            # Accounts are linked by email, so an unverified one must not sign in.
            logger.warning("login_google: unverified_email kind=%s", command.kind)
            raise InvalidAssertionError("Google account email is not verified.")

        identity = self._identity_port.find_identity_by_email(email=email)
        if identity is not None:
            logger.info(
                "login_google: existing identity kind=%s identity_id=%s",
                identity.kind,
                identity.id,
            )
            return issue_token(identity=identity, token_port=self._token_port)

        name = federated_display_name(name=federated.name, email=email)
        # Local login must stay impossible, so the secret is never handed out.
        unusable_password = secrets.token_urlsafe(32)
        identity = self._identity_port.create_identity(
            identity_id=str(uuid4()),
            kind=command.kind,
            name=name,
            email=email,
            phone_number="",
            password_hash=self._password_hasher.hash(unusable_password),
            auth_provider="google",
            created_at=utcnow(),
        )
        logger.info("login_google: created kind=%s identity_id=%s", identity.kind, identity.id)
        return issue_token(identity=identity, token_port=self._token_port)
