"""Room code generation."""
from __future__ import annotations

import secrets
from typing import Callable, Container, Sequence

from .constants import ROOM_CODE_ALPHABET, ROOM_CODE_LENGTH


def generate_room_code(
    existing: Container[str],
    length: int = ROOM_CODE_LENGTH,
    alphabet: Sequence[str] = ROOM_CODE_ALPHABET,
    choice: Callable[[Sequence[str]], str] = secrets.choice,
) -> str:
    """Return a random code of *length* characters not present in *existing*.

    The whole code is redrawn on collision, so with a 32-symbol alphabet and
    six characters retries are rare.
    """
    while True:
        code = "".join(choice(alphabet) for _ in range(length))
        if code not in existing:
            return code


__all__ = ["generate_room_code"]
