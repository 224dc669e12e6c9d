from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from rideshare.api.deps import (
    IdentityKindPath,
    get_login_google_use_case,
    get_login_local_use_case,
    get_register_identity_use_case,
    to_identity_kind,
)
from rideshare.api.schemas.auth import (
    AuthTokenResponse,
    GoogleLoginRequest,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
)
from rideshare.application.dto.auth import (
    AuthTokenOutput,
    IdentityOutput,
    LoginGoogleInput,
    LoginLocalInput,
    RegisterIdentityInput,
)
from rideshare.application.use_cases.login_google import LoginGoogleUseCase
from rideshare.application.use_cases.login_local import LoginLocalUseCase
from rideshare.application.use_cases.register_identity import RegisterIdentityUseCase
from rideshare.domain.exceptions import (
    DuplicateEmailError,
    InternalServerError,
    InvalidCredentialsError,
    ValidationError,
)


logger = logging.getLogger(__name__)

router = APIRouter()


def identity_payload(user: IdentityOutput) -> dict:
    return {
        "id": user.id,
        "kind": user.kind,
        "name": user.name,
        "email": user.email,
        "phone_number": user.phone_number,
        "auth_provider": user.auth_provider,
    }


def _token_response(output: AuthTokenOutput) -> AuthTokenResponse:
    return AuthTokenResponse(
        access_token=output.access_token,
        access_expires_at=output.access_expires_at,
        user=identity_payload(output.user),
    )


@router.post("/v1/{kind}/register", response_model=RegisterResponse, status_code=201)
def register_identity(
    kind: IdentityKindPath,
    req: RegisterRequest,
    use_case: RegisterIdentityUseCase = Depends(get_register_identity_use_case),
):
    try:
        output = use_case.execute(
            RegisterIdentityInput(
                kind=to_identity_kind(kind),
                name=req.name,
                email=req.email,
                phone_number=req.phone_number,
                password=req.password,
            )
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except DuplicateEmailError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except InternalServerError as exc:
        logger.exception("auth_router: register_failed kind=%s", kind.value)
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    return RegisterResponse(user=identity_payload(output.user))


@router.post("/v1/{kind}/signin", response_model=AuthTokenResponse)
def login_local(
    kind: IdentityKindPath,
    req: LoginRequest,
    use_case: LoginLocalUseCase = Depends(get_login_local_use_case),
):
    try:
        output = use_case.execute(
            LoginLocalInput(
                kind=to_identity_kind(kind),
                email=req.email,
                password=req.password,
            )
        )
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc
    except InternalServerError as exc:
        logger.exception("auth_router: signin_failed kind=%s", kind.value)
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    return _token_response(output)


@router.post("/v1/{kind}/google-signup", response_model=AuthTokenResponse)
def login_google(
    kind: IdentityKindPath,
    req: GoogleLoginRequest,
    use_case: LoginGoogleUseCase = Depends(get_login_google_use_case),
):
    try:
        output = use_case.execute(
            LoginGoogleInput(
                kind=to_identity_kind(kind),
                id_token=req.id_token,
            )
        )
    except (InternalServerError, DuplicateEmailError) as exc:
        logger.exception("auth_router: google_signup_failed kind=%s", kind.value)
        raise HTTPException(status_code=500, detail="Internal server error") from exc

    return _token_response(output)
