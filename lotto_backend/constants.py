import os

# Room codes avoid visually ambiguous characters (no I, O, 0, 1).
ROOM_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_CODE_LENGTH = 6

DEFAULT_HOST_NAME = "Host"
DEFAULT_PLAYER_PREFIX = "Player"

ROOM_EXPIRY_SECONDS = int(os.getenv("LOTTO_ROOM_EXPIRY_SECONDS", 24 * 60 * 60))
SWEEP_INTERVAL_SECONDS = int(os.getenv("LOTTO_SWEEP_INTERVAL_SECONDS", 10 * 60))

# Room used by the single-room /api/songs endpoints.
LEGACY_ROOM_CODE = os.getenv("LOTTO_LEGACY_ROOM_CODE", "DEFAULT")

__all__ = [
    "ROOM_CODE_ALPHABET",
    "ROOM_CODE_LENGTH",
    "DEFAULT_HOST_NAME",
    "DEFAULT_PLAYER_PREFIX",
    "ROOM_EXPIRY_SECONDS",
    "SWEEP_INTERVAL_SECONDS",
    "LEGACY_ROOM_CODE",
]
