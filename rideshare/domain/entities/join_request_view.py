from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Union


@dataclass(frozen=True)
class BasicJoinRequestView:
    post_id: str
    starting_location: str
    ending_location: str
    start_time: datetime
    number_of_seats: int
    additional_notes: str | None
    status: Literal["pending", "rejected"]


@dataclass(frozen=True)
class AcceptedJoinRequestView:
    post_id: str
    starting_location: str
    ending_location: str
    start_time: datetime
    number_of_seats: int
    additional_notes: str | None
    status: Literal["accepted"]
    license_number: str
    model: str
    phone_number: str
    email: str


JoinRequestView = Union[BasicJoinRequestView, AcceptedJoinRequestView]
