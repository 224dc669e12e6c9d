from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from rideshare.application.ports.identity_port import IdentityPort
from rideshare.domain.entities.identity import AuthProvider, IdentityKind
from rideshare.domain.exceptions import DuplicateEmailError, IdentityNotFoundError
from rideshare.infrastructure.db.mappers.identity_mapper import map_row_to_identity


logger = logging.getLogger(__name__)

_TABLES: dict[str, str] = {
    "passenger": "public.passengers",
    "driver": "public.drivers",
}

_COLUMNS = (
    "id, name, email, phone_number, password_hash, auth_provider, "
    "avatar_data, avatar_content_type, created_at, updated_at"
)


def _table(kind: IdentityKind) -> str:
    try:
        return _TABLES[kind]
    except KeyError:
        raise ValueError(f"Unknown identity kind: {kind!r}") from None


class SqlIdentityRepository(IdentityPort):
    """Passenger and driver accounts.

    Every account also owns a row in ``public.account_emails``, keyed by email.
    Inserts and email changes write both tables in one transaction, so a
    concurrent registration with the same email fails on that key even when
    both requests passed ``email_exists``.
    """

    def __init__(self, engine):
        self._engine = engine

    def email_exists(self, *, email: str, exclude_identity_id: str | None = None) -> bool:
        sql = """
            SELECT id FROM public.passengers WHERE lower(email) = :email
            UNION ALL
            SELECT id FROM public.drivers WHERE lower(email) = :email
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"email": email.lower()}).mappings().all()
        return any(str(row["id"]) != exclude_identity_id for row in rows)

    def get_identity(self, *, kind: IdentityKind, identity_id: str):
        sql = f"""
            SELECT {_COLUMNS}
            FROM {_table(kind)}
            WHERE id = :identity_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"identity_id": identity_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_identity(row, kind=kind)

    def get_identity_by_email(self, *, kind: IdentityKind, email: str):
        sql = f"""
            SELECT {_COLUMNS}
            FROM {_table(kind)}
            WHERE lower(email) = :email
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"email": email.lower()}).mappings().first()
        if row is None:
            return None
        return map_row_to_identity(row, kind=kind)

    def find_identity_by_email(self, *, email: str):
        for kind in ("passenger", "driver"):
            identity = self.get_identity_by_email(kind=kind, email=email)
            if identity is not None:
                return identity
        return None

    def create_identity(
        self,
        *,
        identity_id: str,
        kind: IdentityKind,
        name: str,
        email: str,
        phone_number: str,
        password_hash: str,
        auth_provider: AuthProvider,
        created_at: datetime,
    ):
        registry_sql = """
            INSERT INTO public.account_emails (email, identity_kind, identity_id, created_at)
            VALUES (:email, :identity_kind, :identity_id, :created_at)
        """
        identity_sql = f"""
            INSERT INTO {_table(kind)} (
                id, name, email, phone_number, password_hash, auth_provider, created_at, updated_at
            ) VALUES (
                :id, :name, :email, :phone_number, :password_hash, :auth_provider, :created_at, :updated_at
            )
            RETURNING {_COLUMNS}
        """
        params = {
            "id": identity_id,
            "name": name,
            "email": email,
            "phone_number": phone_number,
            "password_hash": password_hash,
            "auth_provider": auth_provider,
            "created_at": created_at,
            "updated_at": created_at,
        }
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    text(registry_sql),
                    {
                        "email": email,
                        "identity_kind": kind,
                        "identity_id": identity_id,
                        "created_at": created_at,
                    },
                )
                row = conn.execute(text(identity_sql), params).mappings().one()
        except IntegrityError as exc:
            logger.info("identity_repo: duplicate_email kind=%s identity_id=%s", kind, identity_id)
            raise DuplicateEmailError("User with this email already exists as a driver or passenger") from exc
        return map_row_to_identity(row, kind=kind)

    def update_identity(
        self,
        *,
        kind: IdentityKind,
        identity_id: str,
        name: str | None,
        phone_number: str | None,
        email: str | None,
        password_hash: str | None,
        updated_at: datetime,
    ):
        assignments = ["updated_at = :updated_at"]
        params: dict[str, object] = {"identity_id": identity_id, "updated_at": updated_at}
        for column, value in (
            ("name", name),
            ("phone_number", phone_number),
            ("email", email),
            ("password_hash", password_hash),
        ):
            if value is not None:
                assignments.append(f"{column} = :{column}")
                params[column] = value

        identity_sql = f"""
            UPDATE {_table(kind)}
            SET {", ".join(assignments)}
            WHERE id = :identity_id
            RETURNING {_COLUMNS}
        """
        registry_sql = """
            UPDATE public.account_emails
            SET email = :email
            WHERE identity_id = :identity_id
        """
        try:
            with self._engine.begin() as conn:
                if email is not None:
                    conn.execute(text(registry_sql), {"email": email, "identity_id": identity_id})
                row = conn.execute(text(identity_sql), params).mappings().first()
        except IntegrityError as exc:
            logger.info("identity_repo: duplicate_email_on_update kind=%s identity_id=%s", kind, identity_id)
            raise DuplicateEmailError("Email already in use") from exc

        if row is None:
            raise IdentityNotFoundError("User not found")
        return map_row_to_identity(row, kind=kind)
