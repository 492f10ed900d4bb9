from __future__ import annotations

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from ..schemas import (
    CreateRoomRequest,
    CreateRoomResponse,
    JoinRoomRequest,
    JoinRoomResponse,
    RoomInfo,
    RoomListing,
    StatusMessage,
    UploadResponse,
)
from ..state import get_store
from ..store import RoomStore

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.post("/create", response_model=CreateRoomResponse)
async def create_room(
    req: CreateRoomRequest = Body(default=CreateRoomRequest()),
    store: RoomStore = Depends(get_store),
):
    code = store.create_room(req.roomCode, req.hostName)
    return CreateRoomResponse(roomCode=code, message="Room created successfully")


@router.post("/{room_code}/join", response_model=JoinRoomResponse)
async def join_room(
    room_code: str,
    req: JoinRoomRequest = Body(default=JoinRoomRequest()),
    store: RoomStore = Depends(get_store),
):
    stats = store.join_room(room_code, req.playerName)
    return JoinRoomResponse(
        roomCode=room_code,
        message="You have joined the room",
        **stats.model_dump(),
    )


# Song and played-number bodies are raw JSON arrays; the shape check lives in
# the store so a non-array body yields 400 rather than a validation error.

@router.post("/{room_code}/songs", response_model=UploadResponse)
async def upload_songs(
    room_code: str,
    songs: Any = Body(default=None),
    store: RoomStore = Depends(get_store),
):
    count = store.set_songs(room_code, songs)
    return UploadResponse(count=count, message="Song list updated")


@router.get("/{room_code}/songs", response_model=List[Any])
async def get_songs(room_code: str, store: RoomStore = Depends(get_store)):
    return store.get_songs(room_code)


@router.post("/{room_code}/played", response_model=UploadResponse)
async def upload_played(
    room_code: str,
    played: Any = Body(default=None),
    store: RoomStore = Depends(get_store),
):
    count = store.set_played(room_code, played)
    return UploadResponse(count=count, message="Played numbers updated")


@router.get("/{room_code}/played", response_model=List[Any])
async def get_played(room_code: str, store: RoomStore = Depends(get_store)):
    return store.get_played(room_code)


@router.get("/{room_code}/info", response_model=RoomInfo)
async def room_info(room_code: str, store: RoomStore = Depends(get_store)):
    return store.get_info(room_code)


@router.delete("/{room_code}", response_model=StatusMessage)
async def delete_room(room_code: str, store: RoomStore = Depends(get_store)):
    store.delete_room(room_code)
    return StatusMessage(message="Room deleted")


# ---------------------------------------------------------------------------
# Debug listing
# ---------------------------------------------------------------------------


@router.get("", response_model=List[RoomListing])
async def list_rooms(store: RoomStore = Depends(get_store)):
    return store.list_rooms()
