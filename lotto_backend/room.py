from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List

from .constants import DEFAULT_PLAYER_PREFIX
from .schemas import AdminRoomInfo, ExpiredRoom, RoomInfo, RoomListing, RoomStats

# NOTE: ``Room`` holds no reference back to the store; the store owns every
# instance and drops it on delete.


def _iso(ts: float) -> str:
    return datetime.fromtimestamp(ts, tz=timezone.utc).isoformat()


class Room:
    """Runtime state of one lotto session."""

    def __init__(self, code: str, host_name: str, now: float):
        self.code = code
        self.host_name = host_name
        self.songs: List[Any] = []
        self.played_numbers: List[Any] = []
        # distinct names in join order
        self.players: List[str] = []
        self.created_at: float = now
        self.last_activity: float = now

    # ---------------------------------------------------------------------
    # Mutation helpers
    # ---------------------------------------------------------------------

    def touch(self, now: float) -> None:
        # clock skew must never push activity behind creation
        self.last_activity = max(now, self.created_at)

    def default_player_name(self) -> str:
        return f"{DEFAULT_PLAYER_PREFIX}{len(self.players) + 1}"

    def add_player(self, name: str) -> None:
        if name not in self.players:
            self.players.append(name)

    def idle_seconds(self, now: float) -> float:
        return now - self.last_activity

    # ---------------------------------------------------------------------
    # Summaries
    # ---------------------------------------------------------------------

    def stats(self) -> RoomStats:
        return RoomStats(
            songsCount=len(self.songs),
            playedCount=len(self.played_numbers),
            playersCount=len(self.players),
        )

    def info(self) -> RoomInfo:
        return RoomInfo(
            code=self.code,
            hostName=self.host_name,
            songsCount=len(self.songs),
            playedCount=len(self.played_numbers),
            playersCount=len(self.players),
            createdAt=int(self.created_at * 1000),
            lastActivity=int(self.last_activity * 1000),
        )

    def listing(self) -> RoomListing:
        return RoomListing(
            code=self.code,
            hostName=self.host_name,
            songsCount=len(self.songs),
            playersCount=len(self.players),
            createdAt=_iso(self.created_at),
            lastActivity=_iso(self.last_activity),
        )

    def admin_info(self, now: float) -> AdminRoomInfo:
        return AdminRoomInfo(
            **self.listing().model_dump(),
            playedCount=len(self.played_numbers),
            ageMinutes=round(self.idle_seconds(now) / 60),
        )

    def expired_summary(self, now: float) -> ExpiredRoom:
        return ExpiredRoom(
            code=self.code,
            hostName=self.host_name,
            ageHours=round(self.idle_seconds(now) / 3600),
        )

    def __repr__(self) -> str:
        return f"Room(code={self.code!r}, host_name={self.host_name!r}, players={len(self.players)})"


__all__ = ["Room"]
