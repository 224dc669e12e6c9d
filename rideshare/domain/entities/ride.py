from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal


JoinRequestStatus = Literal["pending", "accepted", "rejected"]


@dataclass(frozen=True)
class DriverPost:
    id: str
    driver_id: str
    starting_location: str
    ending_location: str
    start_time: datetime
    number_of_seats: int
    additional_notes: str | None
    license_number: str
    model: str
    phone_number: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class PassengerPost:
    id: str
    passenger_id: str
    starting_location: str
    ending_location: str
    start_time: datetime
    number_of_seats: int
    additional_notes: str | None
    created_at: datetime


@dataclass(frozen=True)
class JoinRequest:
    id: str
    passenger_id: str
    driver_post_id: str
    status: JoinRequestStatus
    created_at: datetime
    updated_at: datetime
