"""Single-room endpoints kept for clients that predate room codes.

Both operate on one fixed room (``LOTTO_LEGACY_ROOM_CODE``) living in the
regular store, so it expires and is cleared like any other room.
"""
from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request

from ..schemas import UploadResponse
from ..state import get_store
from ..store import RoomStore

router = APIRouter(prefix="/api", tags=["legacy"])


@router.post("/songs", response_model=UploadResponse, response_model_exclude_none=True)
async def upload_legacy_songs(
    request: Request,
    songs: Any = Body(default=None),
    store: RoomStore = Depends(get_store),
):
    code = request.app.state.legacy_room_code
    store.ensure_room(code)
    # Anything other than an array resets the list instead of failing.
    count = store.set_songs(code, songs if isinstance(songs, list) else [])
    return UploadResponse(count=count)


@router.get("/songs", response_model=List[Any])
async def get_legacy_songs(request: Request, store: RoomStore = Depends(get_store)):
    room = store.peek(request.app.state.legacy_room_code)
    return list(room.songs) if room else []
