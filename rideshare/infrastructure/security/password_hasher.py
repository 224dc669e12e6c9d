from __future__ import annotations

from passlib.context import CryptContext

from rideshare.application.ports.password_hasher_port import PasswordHasherPort
from rideshare.domain.exceptions import HashingError, ValidationError


class PasswordHasher(PasswordHasherPort):
    def __init__(self):
        # bcrypt stays verifiable for accounts hashed before argon2 was the default.
        self._ctx = CryptContext(
            schemes=["argon2", "bcrypt"],
            deprecated="auto",
        )

    def hash(self, plain_password: str) -> str:
        if not plain_password or not plain_password.strip():
            raise ValidationError("Password is required.")
        try:
            return self._ctx.hash(plain_password)
        except Exception as exc:
            raise HashingError("Error occurred when hashing password.") from exc

    def verify(self, plain_password: str, password_hash: str) -> bool:
        if not plain_password or not plain_password.strip():
            return False
        try:
            return self._ctx.verify(plain_password, password_hash)
        except Exception as exc:
            raise HashingError("Error occurred when checking password.") from exc
