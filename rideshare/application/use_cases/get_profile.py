from __future__ import annotations

from rideshare.application.dto.profile import ProfileOutput
from rideshare.application.ports.avatar_port import AvatarRendererPort
from rideshare.application.ports.identity_port import IdentityPort
from rideshare.application.ports.rides_port import RidesPort
from rideshare.application.use_cases.list_join_requests import ListJoinRequestsUseCase
from rideshare.domain.entities.identity import IdentityKind
from rideshare.domain.exceptions import IdentityNotFoundError

from .auth_common import build_identity_output


class GetProfileUseCase:
    def __init__(
        self,
        *,
        identity_port: IdentityPort,
        rides_port: RidesPort,
        avatar_renderer: AvatarRendererPort,
        list_join_requests_use_case: ListJoinRequestsUseCase,
    ):
        self._identity_port = identity_port
        self._rides_port = rides_port
        self._avatar_renderer = avatar_renderer
        self._list_join_requests_use_case = list_join_requests_use_case

    def execute(self, *, kind: IdentityKind, identity_id: str) -> ProfileOutput:
        # The token may outlive the account it was issued for.
        identity = self._identity_port.get_identity(kind=kind, identity_id=identity_id)
        if identity is None:
            raise IdentityNotFoundError("User not found")

        if identity.kind == "passenger":
            rideshares = self._list_join_requests_use_case.execute(passenger_id=identity.id)
            passenger_posts = self._rides_port.list_passenger_posts(passenger_id=identity.id)
            driver_posts = []
        else:
            rideshares = []
            passenger_posts = []
            driver_posts = self._rides_port.list_driver_posts(driver_id=identity.id)

        return ProfileOutput(
            user=build_identity_output(identity),
            avatar=self._avatar_renderer.render(identity.avatar),
            rideshares=rideshares,
            passenger_posts=passenger_posts,
            driver_posts=driver_posts,
        )
