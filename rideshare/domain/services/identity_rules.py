from __future__ import annotations

import re

from rideshare.domain.exceptions import ValidationError


EMAIL_PATTERN = re.compile(r"^[\w.-]+@([\w-]+\.)+[\w-]{2,4}$")
NAME_PATTERN = re.compile(r"^[A-Za-z]+$")
PHONE_PATTERN = re.compile(r"^\d{10}$")
PASSWORD_MIN_LENGTH = 8


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_email(email: str) -> str:
    email = normalize_email(email)
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email")
    return email


def validate_name(name: str) -> str:
    name = name.strip()
    if not NAME_PATTERN.match(name):
        raise ValidationError("Invalid name")
    return name


def validate_phone_number(phone_number: str) -> str:
    phone_number = phone_number.strip()
    if not PHONE_PATTERN.match(phone_number):
        raise ValidationError("Invalid phone number")
    return phone_number


def validate_password(password: str) -> str:
    password = password.strip()
    if len(password) < PASSWORD_MIN_LENGTH:
        raise ValidationError("Invalid password")
    return password


def validate_registration(
    *,
    name: str,
    email: str,
    phone_number: str,
    password: str,
) -> tuple[str, str, str, str]:
    """Check registration fields in order and return them cleaned.

    Returns ``(name, email, phone_number, password)``.
    """
    if not all(value.strip() for value in (name, email, phone_number, password)):
        raise ValidationError("Empty input for some fields")

    email = validate_email(email)
    name = validate_name(name)
    phone_number = validate_phone_number(phone_number)
    password = validate_password(password)
    return name, email, phone_number, password


def federated_display_name(*, name: str | None, email: str) -> str:
    """Derive a name that passes ``validate_name`` from a federated assertion.

    Uses the first word of the asserted name with non-letters removed, then the
    email local part the same way, and finally ``"User"``.
    """
    candidates = (name or "").split()[:1] + [email.split("@")[0]]
    for candidate in candidates:
        letters = re.sub(r"[^A-Za-z]", "", candidate)
        if letters:
            return letters
    return "User"
