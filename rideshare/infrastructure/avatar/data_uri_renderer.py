from __future__ import annotations

import base64

from rideshare.application.ports.avatar_port import AvatarRendererPort
from rideshare.domain.entities.identity import Avatar


class DataUriAvatarRenderer(AvatarRendererPort):
    def render(self, avatar: Avatar | None) -> str | None:
        if avatar is None or not avatar.data:
            return None
        encoded = base64.b64encode(avatar.data).decode("ascii")
        return f"data:{avatar.content_type};base64,{encoded}"
