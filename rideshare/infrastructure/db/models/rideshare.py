from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, LargeBinary, Text, text
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column

from rideshare.infrastructure.db.engine import Base


class PassengerModel(Base):
    __tablename__ = "passengers"
    __table_args__ = (
        CheckConstraint("auth_provider IN ('local', 'google')", name="ck_passengers_auth_provider"),
        {"schema": "public"},
    )

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    auth_provider: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'local'"))
    avatar_data: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    avatar_content_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))


class DriverModel(Base):
    __tablename__ = "drivers"
    __table_args__ = (
        CheckConstraint("auth_provider IN ('local', 'google')", name="ck_drivers_auth_provider"),
        {"schema": "public"},
    )

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    auth_provider: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'local'"))
    avatar_data: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
    avatar_content_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))


class AccountEmailModel(Base):
    """One row per registered email, whichever table the account lives in.

    The primary key is what makes an email unique across passengers and drivers.
    """

    __tablename__ = "account_emails"
    __table_args__ = (
        CheckConstraint("identity_kind IN ('passenger', 'driver')", name="ck_account_emails_identity_kind"),
        {"schema": "public"},
    )

    email: Mapped[str] = mapped_column(Text, primary_key=True)
    identity_kind: Mapped[str] = mapped_column(Text, nullable=False)
    identity_id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))


class DriverPostModel(Base):
    __tablename__ = "driver_posts"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), primary_key=True)
    driver_id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), ForeignKey("public.drivers.id"), nullable=False)
    starting_location: Mapped[str] = mapped_column(Text, nullable=False)
    ending_location: Mapped[str] = mapped_column(Text, nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    number_of_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    additional_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    license_number: Mapped[str] = mapped_column(Text, nullable=False)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))


class PassengerPostModel(Base):
    __tablename__ = "passenger_posts"
    __table_args__ = ({"schema": "public"},)

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), primary_key=True)
    passenger_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True), ForeignKey("public.passengers.id"), nullable=False
    )
    starting_location: Mapped[str] = mapped_column(Text, nullable=False)
    ending_location: Mapped[str] = mapped_column(Text, nullable=False)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    number_of_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    additional_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))


class JoinRequestModel(Base):
    __tablename__ = "join_requests"
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'accepted', 'rejected')", name="ck_join_requests_status"),
        {"schema": "public"},
    )

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), primary_key=True)
    passenger_id: Mapped[UUID] = mapped_column(
        PGUUID(as_uuid=True), ForeignKey("public.passengers.id"), nullable=False
    )
    # Posts are removed by the posting service without cascading here.
    driver_post_id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), nullable=False)
    status: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("'pending'"))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=text("now()"))
