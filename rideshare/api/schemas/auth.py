from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    name: str = Field(..., max_length=120)
    email: str = Field(..., max_length=255)
    phone_number: str = Field(..., max_length=32)
    password: str = Field(..., max_length=256)


class LoginRequest(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., max_length=256)


class GoogleLoginRequest(BaseModel):
    id_token: str = Field(..., min_length=1)


class IdentityResponse(BaseModel):
    id: str
    kind: Literal["passenger", "driver"]
    name: str
    email: str
    phone_number: str
    auth_provider: Literal["local", "google"]


class RegisterResponse(BaseModel):
    user: IdentityResponse


class AuthTokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    access_expires_at: datetime
    user: IdentityResponse
