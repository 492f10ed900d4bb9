"""In-memory registry of lotto rooms.

The store is the single owner of every :class:`~lotto_backend.room.Room`.
It performs no awaits, so under the asyncio event loop each operation runs
to completion before any other handler or the sweeper gets a turn.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Iterator, List, Optional

from .codes import generate_room_code
from .constants import DEFAULT_HOST_NAME, ROOM_EXPIRY_SECONDS
from .errors import CodeConflict, InvalidPayload, RoomNotFound
from .room import Room
from .schemas import RoomInfo, RoomListing, RoomStats

logger = logging.getLogger(__name__)


class RoomStore:
    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        ttl: float = ROOM_EXPIRY_SECONDS,
        code_generator: Callable[..., str] = generate_room_code,
    ):
        self._rooms: Dict[str, Room] = {}
        self._clock = clock
        self._generate_code = code_generator
        self.ttl = ttl

    # ---------------------------------------------------------------------
    # Lookup helpers
    # ---------------------------------------------------------------------

    def now(self) -> float:
        return self._clock()

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, code: object) -> bool:
        return code in self._rooms

    def __iter__(self) -> Iterator[Room]:
        return iter(list(self._rooms.values()))

    def peek(self, code: str) -> Optional[Room]:
        """Return the room for *code* without refreshing its activity."""
        return self._rooms.get(code)

    def _get(self, code: str) -> Room:
        room = self._rooms.get(code)
        if room is None:
            raise RoomNotFound(code)
        return room

    def _touch(self, code: str) -> Room:
        room = self._get(code)
        room.touch(self.now())
        return room

    # ---------------------------------------------------------------------
    # Lifecycle
    # ---------------------------------------------------------------------

    def create_room(self, requested_code: Optional[str] = None, host_name: Optional[str] = None) -> str:
        if requested_code and requested_code in self._rooms:
            raise CodeConflict(requested_code, self._generate_code(self._rooms))

        code = requested_code or self._generate_code(self._rooms)
        host = host_name or DEFAULT_HOST_NAME
        self._rooms[code] = Room(code, host, self.now())
        logger.info("Room created: %s (host: %s)", code, host)
        return code

    def ensure_room(self, code: str) -> Room:
        room = self._rooms.get(code)
        if room is None:
            self.create_room(code)
            room = self._rooms[code]
        return room

    def delete_room(self, code: str) -> None:
        self._get(code)
        del self._rooms[code]
        logger.info("Room %s deleted", code)

    def clear_all(self) -> int:
        count = len(self._rooms)
        self._rooms.clear()
        logger.info("All rooms cleared (%d removed)", count)
        return count

    def remove_expired(self, now: Optional[float] = None, ttl: Optional[float] = None) -> List[Room]:
        """Drop every room idle for longer than *ttl* and return the dropped rooms."""
        now = self.now() if now is None else now
        ttl = self.ttl if ttl is None else ttl
        expired = [room for room in self._rooms.values() if room.idle_seconds(now) > ttl]
        for room in expired:
            del self._rooms[room.code]
            logger.info("Room %s expired after %.0f idle seconds", room.code, room.idle_seconds(now))
        return expired

    def sweep_expired(self, now: Optional[float] = None, ttl: Optional[float] = None) -> int:
        return len(self.remove_expired(now, ttl))

    # ---------------------------------------------------------------------
    # Players
    # ---------------------------------------------------------------------

    def join_room(self, code: str, player_name: Optional[str] = None) -> RoomStats:
        room = self._touch(code)
        name = player_name or room.default_player_name()
        room.add_player(name)
        logger.info("Player joined: %s -> %s", name, code)
        return room.stats()

    # ---------------------------------------------------------------------
    # Songs & played numbers
    # ---------------------------------------------------------------------

    def set_songs(self, code: str, songs: Any) -> int:
        room = self._get(code)
        if not isinstance(songs, list):
            raise InvalidPayload("Expected an array of songs")
        room.songs = list(songs)
        room.touch(self.now())
        logger.info("Room %s: %d songs uploaded", code, len(room.songs))
        return len(room.songs)

    def get_songs(self, code: str) -> List[Any]:
        return list(self._touch(code).songs)

    def set_played(self, code: str, played: Any) -> int:
        room = self._get(code)
        if not isinstance(played, list):
            raise InvalidPayload("Expected an array of numbers")
        room.played_numbers = list(played)
        room.touch(self.now())
        return len(room.played_numbers)

    def get_played(self, code: str) -> List[Any]:
        return list(self._touch(code).played_numbers)

    # ---------------------------------------------------------------------
    # Summaries
    # ---------------------------------------------------------------------

    def get_info(self, code: str) -> RoomInfo:
        return self._touch(code).info()

    def list_rooms(self) -> List[RoomListing]:
        return [room.listing() for room in self._rooms.values()]


__all__ = ["RoomStore"]
