from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from ..auth_utils import AdminGuard, get_admin_guard
from ..schemas import (
    AdminRoomsResponse,
    CleanupResponse,
    ClearRoomsResponse,
)
from ..state import get_store, get_sweeper
from ..store import RoomStore
from ..sweeper import RoomSweeper

router = APIRouter(prefix="/api/admin", tags=["admin"])
logger = logging.getLogger(__name__)


def _password_attempt(body: Any, query_password: Optional[str]) -> Any:
    """Pick the password from a JSON object body, falling back to the query string.

    The body is taken unvalidated; the guard turns a wrong-typed password
    into 401.
    """
    attempt = body.get("password") if isinstance(body, dict) else None
    return attempt if attempt not in (None, "") else query_password


@router.post("/clear-rooms", response_model=ClearRoomsResponse)
async def clear_rooms(
    body: Any = Body(default=None),
    password: Optional[str] = Query(default=None),
    guard: AdminGuard = Depends(get_admin_guard),
    store: RoomStore = Depends(get_store),
):
    guard.check(_password_attempt(body, password))
    deleted = store.clear_all()
    logger.info("Admin cleared all rooms (%d removed)", deleted)
    return ClearRoomsResponse(
        message=f"Deleted {deleted} rooms",
        clearedAt=datetime.now(timezone.utc).isoformat(),
        deletedCount=deleted,
    )


@router.post("/cleanup", response_model=CleanupResponse)
async def cleanup_expired(
    body: Any = Body(default=None),
    password: Optional[str] = Query(default=None),
    guard: AdminGuard = Depends(get_admin_guard),
    store: RoomStore = Depends(get_store),
    sweeper: RoomSweeper = Depends(get_sweeper),
):
    guard.check(_password_attempt(body, password))
    now = store.now()
    removed = store.remove_expired(now=now, ttl=sweeper.ttl)
    logger.info("Admin cleanup of expired rooms: %d removed", len(removed))
    return CleanupResponse(
        deletedCount=len(removed),
        deletedRooms=[room.expired_summary(now) for room in removed],
        remainingCount=len(store),
    )


@router.get("/rooms-info", response_model=AdminRoomsResponse)
async def rooms_info(
    password: Optional[str] = Query(default=None),
    guard: AdminGuard = Depends(get_admin_guard),
    store: RoomStore = Depends(get_store),
):
    guard.check(password)
    now = store.now()
    return AdminRoomsResponse(
        totalRooms=len(store),
        rooms=[room.admin_info(now) for room in store],
    )
