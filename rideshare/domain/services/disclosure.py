from __future__ import annotations

from rideshare.domain.entities.join_request_view import (
    AcceptedJoinRequestView,
    BasicJoinRequestView,
    JoinRequestView,
)
from rideshare.domain.entities.ride import DriverPost, JoinRequest


CONTACT_FIELDS: tuple[str, ...] = ("license_number", "model", "phone_number", "email")


def build_join_request_view(*, request: JoinRequest, post: DriverPost) -> JoinRequestView:
    """Render a join request against its driver post.

    Driver contact and vehicle details are only part of the view once the
    driver has accepted the request. Pending and rejected requests get a view
    type that has no contact fields at all.
    """
    if request.driver_post_id != post.id:
        raise ValueError("Driver post does not match join request.")

    if request.status == "accepted":
        return AcceptedJoinRequestView(
            post_id=post.id,
            starting_location=post.starting_location,
            ending_location=post.ending_location,
            start_time=post.start_time,
            number_of_seats=post.number_of_seats,
            additional_notes=post.additional_notes,
            status="accepted",
            license_number=post.license_number,
            model=post.model,
            phone_number=post.phone_number,
            email=post.email,
        )

    if request.status in ("pending", "rejected"):
        return BasicJoinRequestView(
            post_id=post.id,
            starting_location=post.starting_location,
            ending_location=post.ending_location,
            start_time=post.start_time,
            number_of_seats=post.number_of_seats,
            additional_notes=post.additional_notes,
            status=request.status,
        )

    raise ValueError(f"Unknown join request status: {request.status!r}")
