from __future__ import annotations

from typing import Any, Mapping

from rideshare.domain.entities.ride import DriverPost, JoinRequest, PassengerPost


def _as_str(value: Any) -> str:
    return str(value)


def map_row_to_driver_post(row: Mapping[str, Any]) -> DriverPost:
    return DriverPost(
        id=_as_str(row["id"]),
        driver_id=_as_str(row["driver_id"]),
        starting_location=row["starting_location"],
        ending_location=row["ending_location"],
        start_time=row["start_time"],
        number_of_seats=int(row["number_of_seats"]),
        additional_notes=row.get("additional_notes"),
        license_number=row["license_number"],
        model=row["model"],
        phone_number=row["phone_number"],
        email=row["email"],
        created_at=row["created_at"],
    )


def map_row_to_passenger_post(row: Mapping[str, Any]) -> PassengerPost:
    return PassengerPost(
        id=_as_str(row["id"]),
        passenger_id=_as_str(row["passenger_id"]),
        starting_location=row["starting_location"],
        ending_location=row["ending_location"],
        start_time=row["start_time"],
        number_of_seats=int(row["number_of_seats"]),
        additional_notes=row.get("additional_notes"),
        created_at=row["created_at"],
    )


def map_row_to_join_request(row: Mapping[str, Any]) -> JoinRequest:
    return JoinRequest(
        id=_as_str(row["id"]),
        passenger_id=_as_str(row["passenger_id"]),
        driver_post_id=_as_str(row["driver_post_id"]),
        status=row["status"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def map_row_to_join_request_with_post(row: Mapping[str, Any]) -> tuple[JoinRequest, DriverPost | None]:
    """Split a ``join_requests LEFT JOIN driver_posts`` row.

    Post columns are expected with a ``post_`` prefix; a null ``post_id`` means
    the referenced post is gone.
    """
    request = map_row_to_join_request(
        {
            "id": row["id"],
            "passenger_id": row["passenger_id"],
            "driver_post_id": row["driver_post_id"],
            "status": row["status"],
            "created_at": row["created_at"],
            "updated_at": row["updated_at"],
        }
    )
    if row.get("post_id") is None:
        return request, None

    post = map_row_to_driver_post(
        {
            "id": row["post_id"],
            "driver_id": row["post_driver_id"],
            "starting_location": row["post_starting_location"],
            "ending_location": row["post_ending_location"],
            "start_time": row["post_start_time"],
            "number_of_seats": row["post_number_of_seats"],
            "additional_notes": row.get("post_additional_notes"),
            "license_number": row["post_license_number"],
            "model": row["post_model"],
            "phone_number": row["post_phone_number"],
            "email": row["post_email"],
            "created_at": row["post_created_at"],
        }
    )
    return request, post
