from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException

from rideshare.api.deps import (
    IdentityKindPath,
    get_current_identity,
    get_current_passenger,
    get_get_profile_use_case,
    get_list_my_join_requests_use_case,
    get_update_profile_use_case,
)
from rideshare.api.routers.auth import identity_payload
from rideshare.api.schemas.profile import (
    JoinRequestResponse,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileResponse,
)
from rideshare.application.dto.auth import AccessTokenPayload
from rideshare.application.dto.profile import UpdateProfileInput
from rideshare.application.use_cases.get_profile import GetProfileUseCase
from rideshare.application.use_cases.list_join_requests import ListMyJoinRequestsUseCase
from rideshare.application.use_cases.update_profile import UpdateProfileUseCase
from rideshare.domain.exceptions import (
    DuplicateEmailError,
    IdentityNotFoundError,
    InternalServerError,
    ValidationError,
)


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/v1/passengers/my-join-requests", response_model=list[JoinRequestResponse])
def list_my_join_requests(
    identity: AccessTokenPayload = Depends(get_current_passenger),
    use_case: ListMyJoinRequestsUseCase = Depends(get_list_my_join_requests_use_case),
):
    try:
        views = use_case.execute(passenger_id=identity.identity_id)
    except IdentityNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return [asdict(view) for view in views]


@router.get("/v1/{kind}/profile", response_model=ProfileResponse)
def get_profile(
    identity: AccessTokenPayload = Depends(get_current_identity),
    use_case: GetProfileUseCase = Depends(get_get_profile_use_case),
):
    try:
        output = use_case.execute(kind=identity.kind, identity_id=identity.identity_id)
    except IdentityNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return ProfileResponse(
        user=identity_payload(output.user),
        avatar=output.avatar,
        rideshares=[asdict(view) for view in output.rideshares],
        passenger_posts=[asdict(post) for post in output.passenger_posts],
        driver_posts=[asdict(post) for post in output.driver_posts],
    )


@router.put("/v1/{kind}/profile", response_model=UpdateProfileResponse)
def update_profile(
    kind: IdentityKindPath,
    req: UpdateProfileRequest,
    identity: AccessTokenPayload = Depends(get_current_identity),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
):
    try:
        output = use_case.execute(
            UpdateProfileInput(
                kind=identity.kind,
                identity_id=identity.identity_id,
                name=req.name,
                phone_number=req.phone_number,
                email=req.email,
                new_password=req.new_password,
            )
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except IdentityNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except DuplicateEmailError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except InternalServerError as exc:
        logger.exception("profile_router: update_failed kind=%s", kind.value)
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    return UpdateProfileResponse(user=identity_payload(output.user))
