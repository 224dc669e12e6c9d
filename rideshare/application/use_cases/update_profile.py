from __future__ import annotations

import logging

from rideshare.application.dto.profile import UpdateProfileInput, UpdateProfileOutput
from rideshare.application.ports.identity_port import IdentityPort
from rideshare.application.ports.password_hasher_port import PasswordHasherPort
from rideshare.domain.exceptions import DuplicateEmailError, IdentityNotFoundError
from rideshare.domain.services.identity_rules import (
    validate_email,
    validate_name,
    validate_password,
    validate_phone_number,
)

from .auth_common import build_identity_output, utcnow


logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    def __init__(
        self,
        *,
        identity_port: IdentityPort,
        password_hasher: PasswordHasherPort,
    ):
        self._identity_port = identity_port
        self._password_hasher = password_hasher

    def execute(self, command: UpdateProfileInput) -> UpdateProfileOutput:
        identity = self._identity_port.get_identity(kind=command.kind, identity_id=command.identity_id)
        if identity is None:
            raise IdentityNotFoundError("User not found")

        name = validate_name(command.name) if command.name else None
        phone_number = validate_phone_number(command.phone_number) if command.phone_number else None

        email = None
        if command.email:
            candidate = validate_email(command.email)
            if candidate != identity.email:
                if self._identity_port.email_exists(email=candidate, exclude_identity_id=identity.id):
                    raise DuplicateEmailError("Email already in use")
                email = candidate

        password_hash = None
        if command.new_password:
            password_hash = self._password_hasher.hash(validate_password(command.new_password))

        if name is None and phone_number is None and email is None and password_hash is None:
            return UpdateProfileOutput(user=build_identity_output(identity))

        updated = self._identity_port.update_identity(
            kind=identity.kind,
            identity_id=identity.id,
            name=name,
            phone_number=phone_number,
            email=email,
            password_hash=password_hash,
            updated_at=utcnow(),
        )
        logger.info(
            "update_profile: updated kind=%s identity_id=%s email_changed=%s password_changed=%s",
            updated.kind,
            updated.id,
            email is not None,
            password_hash is not None,
        )
        return UpdateProfileOutput(user=build_identity_output(updated))
