"""Pydantic data schemas used across the backend service.

Field names follow the camelCase JSON contract the lotto clients already
speak, so models are returned as-is without aliasing.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

# -----------------------------
# Room summaries
# -----------------------------

class RoomStats(BaseModel):
    """Counters returned to a player after joining."""

    songsCount: int
    playedCount: int
    playersCount: int


class RoomInfo(BaseModel):
    code: str
    hostName: str
    songsCount: int
    playedCount: int
    playersCount: int
    # epoch milliseconds
    createdAt: int
    lastActivity: int


class RoomListing(BaseModel):
    code: str
    hostName: str
    songsCount: int
    playersCount: int
    # ISO-8601, UTC
    createdAt: str
    lastActivity: str


class AdminRoomInfo(RoomListing):
    playedCount: int
    ageMinutes: int


class ExpiredRoom(BaseModel):
    code: str
    hostName: str
    ageHours: int


# -----------------------------
# REST request / response models
# -----------------------------

class CreateRoomRequest(BaseModel):
    roomCode: Optional[str] = None
    hostName: Optional[str] = None


class CreateRoomResponse(BaseModel):
    status: str = "ok"
    roomCode: str
    message: str = "Room created"


class JoinRoomRequest(BaseModel):
    playerName: Optional[str] = None


class JoinRoomResponse(RoomStats):
    status: str = "ok"
    roomCode: str
    message: str = "Joined room"


class UploadResponse(BaseModel):
    status: str = "ok"
    count: int
    message: Optional[str] = None


class StatusMessage(BaseModel):
    status: str = "ok"
    message: str


class ClearRoomsResponse(BaseModel):
    status: str = "ok"
    message: str
    clearedAt: str
    deletedCount: int


class CleanupResponse(BaseModel):
    status: str = "ok"
    deletedCount: int
    deletedRooms: List[ExpiredRoom]
    remainingCount: int


class AdminRoomsResponse(BaseModel):
    totalRooms: int
    rooms: List[AdminRoomInfo]


class ServerStatus(BaseModel):
    status: str = "running"
    totalRooms: int
    uptime: float
    memory: Dict[str, Any]
    timestamp: str


__all__ = [
    "RoomStats",
    "RoomInfo",
    "RoomListing",
    "AdminRoomInfo",
    "ExpiredRoom",
    "CreateRoomRequest",
    "CreateRoomResponse",
    "JoinRoomRequest",
    "JoinRoomResponse",
    "UploadResponse",
    "StatusMessage",
    "ClearRoomsResponse",
    "CleanupResponse",
    "AdminRoomsResponse",
    "ServerStatus",
]
