from __future__ import annotations

from typing import Protocol

from rideshare.domain.entities.ride import DriverPost, JoinRequest, PassengerPost


class RidesPort(Protocol):
    def list_join_requests_for_passenger(
        self,
        *,
        passenger_id: str,
    ) -> list[tuple[JoinRequest, DriverPost | None]]:
        ...

    def list_passenger_posts(self, *, passenger_id: str) -> list[PassengerPost]:
        ...

    def list_driver_posts(self, *, driver_id: str) -> list[DriverPost]:
        ...
