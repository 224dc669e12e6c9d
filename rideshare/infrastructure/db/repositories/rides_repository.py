from __future__ import annotations

from sqlalchemy import text

from rideshare.application.ports.rides_port import RidesPort
from rideshare.infrastructure.db.mappers.rides_mapper import (
    map_row_to_driver_post,
    map_row_to_join_request_with_post,
    map_row_to_passenger_post,
)


class SqlRidesRepository(RidesPort):
    def __init__(self, engine):
        self._engine = engine

    def list_join_requests_for_passenger(self, *, passenger_id: str):
        sql = """
            SELECT
                jr.id,
                jr.passenger_id,
                jr.driver_post_id,
                jr.status,
                jr.created_at,
                jr.updated_at,
                dp.id AS post_id,
                dp.driver_id AS post_driver_id,
                dp.starting_location AS post_starting_location,
                dp.ending_location AS post_ending_location,
                dp.start_time AS post_start_time,
                dp.number_of_seats AS post_number_of_seats,
                dp.additional_notes AS post_additional_notes,
                dp.license_number AS post_license_number,
                dp.model AS post_model,
                dp.phone_number AS post_phone_number,
                dp.email AS post_email,
                dp.created_at AS post_created_at
            FROM public.join_requests jr
            LEFT JOIN public.driver_posts dp
              ON dp.id = jr.driver_post_id
            WHERE jr.passenger_id = :passenger_id
            ORDER BY jr.created_at, jr.id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"passenger_id": passenger_id}).mappings().all()
        return [map_row_to_join_request_with_post(row) for row in rows]

    def list_passenger_posts(self, *, passenger_id: str):
        sql = """
            SELECT
                id,
                passenger_id,
                starting_location,
                ending_location,
                start_time,
                number_of_seats,
                additional_notes,
                created_at
            FROM public.passenger_posts
            WHERE passenger_id = :passenger_id
            ORDER BY created_at, id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"passenger_id": passenger_id}).mappings().all()
        return [map_row_to_passenger_post(row) for row in rows]

    def list_driver_posts(self, *, driver_id: str):
        sql = """
            SELECT
                id,
                driver_id,
                starting_location,
                ending_location,
                start_time,
                number_of_seats,
                additional_notes,
                license_number,
                model,
                phone_number,
                email,
                created_at
            FROM public.driver_posts
            WHERE driver_id = :driver_id
            ORDER BY created_at, id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"driver_id": driver_id}).mappings().all()
        return [map_row_to_driver_post(row) for row in rows]
