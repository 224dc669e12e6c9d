from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from rideshare.api.schemas.auth import IdentityResponse


class BasicJoinRequestResponse(BaseModel):
    post_id: str
    starting_location: str
    ending_location: str
    start_time: datetime
    number_of_seats: int
    additional_notes: str | None
    status: Literal["pending", "rejected"]


class AcceptedJoinRequestResponse(BaseModel):
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


JoinRequestResponse = Annotated[
    Union[AcceptedJoinRequestResponse, BasicJoinRequestResponse],
    Field(discriminator="status"),
]


class DriverPostResponse(BaseModel):
    id: str
    starting_location: str
    ending_location: str
    start_time: datetime
    number_of_seats: int
    additional_notes: str | None
    license_number: str
    model: str
    phone_number: str
    email: str


class PassengerPostResponse(BaseModel):
    id: str
    starting_location: str
    ending_location: str
    start_time: datetime
    number_of_seats: int
    additional_notes: str | None


class ProfileResponse(BaseModel):
    user: IdentityResponse
    avatar: str | None
    rideshares: list[JoinRequestResponse]
    passenger_posts: list[PassengerPostResponse]
    driver_posts: list[DriverPostResponse]


class UpdateProfileRequest(BaseModel):
    name: str | None = Field(default=None, max_length=120)
    phone_number: str | None = Field(default=None, max_length=32)
    email: str | None = Field(default=None, max_length=255)
    new_password: str | None = Field(default=None, max_length=256)


class UpdateProfileResponse(BaseModel):
    user: IdentityResponse
