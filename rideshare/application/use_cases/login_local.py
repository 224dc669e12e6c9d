from __future__ import annotations

from rideshare.application.dto.auth import AuthTokenOutput, LoginLocalInput
from rideshare.application.ports.identity_port import IdentityPort
from rideshare.application.ports.password_hasher_port import PasswordHasherPort
from rideshare.application.ports.token_port import TokenPort
from rideshare.domain.exceptions import InvalidCredentialsError, ValidationError
from rideshare.domain.services.identity_rules import normalize_email

from .auth_common import issue_token


class LoginLocalUseCase:
    def __init__(
        self,
        *,
        identity_port: IdentityPort,
        password_hasher: PasswordHasherPort,
        token_port: TokenPort,
    ):
        self._identity_port = identity_port
        self._password_hasher = password_hasher
        self._token_port = token_port

    def execute(self, command: LoginLocalInput) -> AuthTokenOutput:
        email = normalize_email(command.email)
        password = command.password.strip()
        if not email or not password:
            raise ValidationError("Empty input")

        identity = self._identity_port.get_identity_by_email(kind=command.kind, email=email)
        if identity is None:
            raise InvalidCredentialsError("No existing user with input email")

        # Federation-only accounts hold a hash of a secret nobody knows, so
        # this check fails for them like any other wrong password.
        if not identity.password_hash or not self._password_hasher.verify(password, identity.password_hash):
            raise InvalidCredentialsError("Wrong password")

        return issue_token(identity=identity, token_port=self._token_port)
