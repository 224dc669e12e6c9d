from __future__ import annotations

from dataclasses import dataclass

from rideshare.application.dto.auth import IdentityOutput
from rideshare.domain.entities.identity import IdentityKind
from rideshare.domain.entities.join_request_view import JoinRequestView
from rideshare.domain.entities.ride import DriverPost, PassengerPost


@dataclass(frozen=True)
class ProfileOutput:
    user: IdentityOutput
    avatar: str | None
    rideshares: list[JoinRequestView]
    passenger_posts: list[PassengerPost]
    driver_posts: list[DriverPost]


@dataclass(frozen=True)
class UpdateProfileInput:
    kind: IdentityKind
    identity_id: str
    name: str | None = None
    phone_number: str | None = None
    email: str | None = None
    new_password: str | None = None


@dataclass(frozen=True)
class UpdateProfileOutput:
    user: IdentityOutput
