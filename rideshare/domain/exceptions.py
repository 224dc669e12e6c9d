from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class ValidationError(DomainError):
    """Malformed input rejected before touching the store."""


class DuplicateEmailError(DomainError):
    """Email already registered as a passenger or a driver."""


class AuthError(DomainError):
    """Base for authentication failures."""


class InvalidCredentialsError(AuthError):
    """Unknown email or wrong password."""


class ExpiredTokenError(AuthError):
    """Access token is past its expiry."""


class InvalidSignatureError(AuthError):
    """Access token was not signed with the server key."""


class MalformedTokenError(AuthError):
    """Access token cannot be decoded or lacks required claims."""


class NotFoundError(DomainError):
    """Referenced record does not exist."""


class IdentityNotFoundError(NotFoundError):
    """Passenger or driver account does not exist."""


class DanglingReferenceError(NotFoundError):
    """Join request points at a driver post that cannot be resolved."""


class InternalServerError(DomainError):
    """Infrastructure failure; details stay in server logs."""


class HashingError(InternalServerError):
    """Password hashing backend failed."""


class InvalidAssertionError(InternalServerError):
    """Third-party identity assertion failed verification."""
