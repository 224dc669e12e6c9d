from __future__ import annotations

from typing import Protocol

from rideshare.domain.entities.identity import Avatar


class AvatarRendererPort(Protocol):
    def render(self, avatar: Avatar | None) -> str | None:
        ...
