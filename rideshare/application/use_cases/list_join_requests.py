from __future__ import annotations

import logging

from rideshare.application.ports.identity_port import IdentityPort
from rideshare.application.ports.rides_port import RidesPort
from rideshare.domain.entities.join_request_view import JoinRequestView
from rideshare.domain.exceptions import DanglingReferenceError, IdentityNotFoundError
from rideshare.domain.services.disclosure import build_join_request_view


logger = logging.getLogger(__name__)


class ListJoinRequestsUseCase:
    """Join requests made by a passenger, rendered with status-gated disclosure.

    A request whose driver post can no longer be resolved is logged and left
    out; the remaining requests are still returned.
    """

    def __init__(self, *, rides_port: RidesPort):
        self._rides_port = rides_port

    def execute(self, *, passenger_id: str) -> list[JoinRequestView]:
        rows = self._rides_port.list_join_requests_for_passenger(passenger_id=passenger_id)

        views: list[JoinRequestView] = []
        for request, post in rows:
            if post is None:
                error = DanglingReferenceError(
                    f"Join request {request.id} references missing driver post {request.driver_post_id}."
                )
                logger.error(
                    "list_join_requests: dangling_reference passenger_id=%s join_request_id=%s "
                    "driver_post_id=%s error=%s",
                    passenger_id,
                    request.id,
                    request.driver_post_id,
                    error,
                )
                continue
            views.append(build_join_request_view(request=request, post=post))
        return views


class ListMyJoinRequestsUseCase:
    def __init__(
        self,
        *,
        identity_port: IdentityPort,
        list_join_requests_use_case: ListJoinRequestsUseCase,
    ):
        self._identity_port = identity_port
        self._list_join_requests_use_case = list_join_requests_use_case

    def execute(self, *, passenger_id: str) -> list[JoinRequestView]:
        if self._identity_port.get_identity(kind="passenger", identity_id=passenger_id) is None:
            raise IdentityNotFoundError("User not found")
        return self._list_join_requests_use_case.execute(passenger_id=passenger_id)
