from __future__ import annotations

import logging
from uuid import uuid4

from rideshare.application.dto.auth import RegisterIdentityInput, RegisterIdentityOutput
from rideshare.application.ports.identity_port import IdentityPort
from rideshare.application.ports.password_hasher_port import PasswordHasherPort
from rideshare.domain.exceptions import DuplicateEmailError
from rideshare.domain.services.identity_rules import validate_registration

from .auth_common import build_identity_output, utcnow


logger = logging.getLogger(__name__)


class RegisterIdentityUseCase:
    def __init__(
        self,
        *,
        identity_port: IdentityPort,
        password_hasher: PasswordHasherPort,
    ):
        self._identity_port = identity_port
        self._password_hasher = password_hasher

    def execute(self, command: RegisterIdentityInput) -> RegisterIdentityOutput:
        name, email, phone_number, password = validate_registration(
            name=command.name,
            email=command.email,
            phone_number=command.phone_number,
            password=command.password,
        )

        # Fast path only; the store's email registry is the authoritative check.
        if self._identity_port.email_exists(email=email):
            raise DuplicateEmailError("User with this email already exists as a driver or passenger")

        password_hash = self._password_hasher.hash(password)
        identity = self._identity_port.create_identity(
            identity_id=str(uuid4()),
            kind=command.kind,
            name=name,
            email=email,
            phone_number=phone_number,
            password_hash=password_hash,
            auth_provider="local",
            created_at=utcnow(),
        )
        logger.info("register_identity: created kind=%s identity_id=%s", identity.kind, identity.id)
        return RegisterIdentityOutput(user=build_identity_output(identity))
