"""FastAPI application factory.

Assembles CORS and all API routers.
This module is the authoritative app object; ngphone/main.py re-exports it.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ngphone.api.routes.health import router as health_router
from ngphone.api.routes.phones import router as phones_router
from ngphone.core.logging import setup_logging
from ngphone.core.settings import get_settings
from ngphone.telco.service import get_phone_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    service = get_phone_service()
    logger.info(
        "phone service ready (capacity=%d, cache_key=%s)",
        service.cache.capacity,
        service.cache_key,
    )
    yield
    service.clear_caches()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(phones_router)
