"""Error taxonomy shared by the room store and the HTTP layer.

Store operations raise these; the application registers a single handler that
turns any :class:`LottoError` into a JSON response with ``status_code``.
"""
from __future__ import annotations

from typing import Any, Dict


class LottoError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class RoomNotFound(LottoError):
    status_code = 404

    def __init__(self, code: str):
        super().__init__("Room not found")
        self.code = code


class InvalidPayload(LottoError):
    status_code = 400


class CodeConflict(LottoError):
    """Raised when an explicitly requested room code is already taken."""

    status_code = 400

    def __init__(self, code: str, suggested_code: str):
        super().__init__("A room with this code already exists")
        self.code = code
        self.suggested_code = suggested_code

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "suggestedCode": self.suggested_code}


class Unauthorized(LottoError):
    status_code = 401

    def __init__(self, message: str = "Invalid password"):
        super().__init__(message)


__all__ = [
    "LottoError",
    "RoomNotFound",
    "InvalidPayload",
    "CodeConflict",
    "Unauthorized",
]
