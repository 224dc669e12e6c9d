from __future__ import annotations

from typing import Any, Mapping

from rideshare.domain.entities.identity import Avatar, Identity, IdentityKind


def _as_str(value: Any) -> str:
    return str(value)


def map_row_to_identity(row: Mapping[str, Any], *, kind: IdentityKind) -> Identity:
    avatar = None
    if row.get("avatar_data"):
        avatar = Avatar(
            data=bytes(row["avatar_data"]),
            content_type=row.get("avatar_content_type") or "image/png",
        )
    return Identity(
        id=_as_str(row["id"]),
        kind=kind,
        name=row["name"],
        email=row["email"],
        phone_number=row.get("phone_number") or "",
        password_hash=row.get("password_hash"),
        auth_provider=row.get("auth_provider") or "local",
        avatar=avatar,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
