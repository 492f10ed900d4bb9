from __future__ import annotations

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import constants
from .auth_utils import AdminGuard
from .errors import LottoError
from .routers import admin as admin_router
from .routers import legacy as legacy_router
from .routers import rooms as rooms_router
from .routers import status as status_router
from .store import RoomStore
from .sweeper import RoomSweeper

logger = logging.getLogger(__name__)

_UNSET = object()


# -----------------------------
# Lifespan
# -----------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    sweeper: RoomSweeper = app.state.sweeper
    sweeper.start()
    try:
        yield
    finally:
        await sweeper.stop()


# -----------------------------
# Exception handlers
# -----------------------------

async def lotto_error_handler(request: Request, exc: LottoError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# -----------------------------
# Application factory
# -----------------------------

def create_app(
    *,
    clock: Callable[[], float] = time.time,
    ttl: float = constants.ROOM_EXPIRY_SECONDS,
    sweep_interval: float = constants.SWEEP_INTERVAL_SECONDS,
    admin_password: Optional[str] = _UNSET,  # type: ignore[assignment]
    legacy_room_code: str = constants.LEGACY_ROOM_CODE,
) -> FastAPI:
    """Build the application together with the runtime objects it owns."""
    if admin_password is _UNSET:
        # read per app; only the guard's hash outlives this call
        admin_password = os.getenv("LOTTO_ADMIN_PASSWORD") or None

    app = FastAPI(title="Musical Lotto Server", lifespan=lifespan)

    # Allow all origins; lotto clients are served from arbitrary hosts.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    store = RoomStore(clock=clock, ttl=ttl)
    app.state.store = store
    app.state.sweeper = RoomSweeper(store, interval=sweep_interval, ttl=ttl)
    app.state.admin_guard = AdminGuard(admin_password)
    app.state.legacy_room_code = legacy_room_code
    app.state.started_at = time.monotonic()

    app.add_exception_handler(LottoError, lotto_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routers
    app.include_router(rooms_router.router)
    app.include_router(admin_router.router)
    app.include_router(legacy_router.router)
    app.include_router(status_router.router)

    return app


app = create_app()

__all__ = ["app", "create_app"]
