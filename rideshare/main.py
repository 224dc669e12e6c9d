from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rideshare.api.routers.auth import router as auth_router
from rideshare.api.routers.profile import router as profile_router
from rideshare.shared.config import get_settings


settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(title="Rideshare API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile_router)
app.include_router(auth_router)


@app.get("/health")
def health():
    return {"status": "ok"}
