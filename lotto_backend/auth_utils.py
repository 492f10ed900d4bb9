from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Request
from passlib.context import CryptContext
from passlib.exc import PasswordSizeError

from .errors import Unauthorized

logger = logging.getLogger(__name__)

# -----------------------------
# Password hashing helpers
# -----------------------------

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Return a salted pbkdf2 hash of *password*."""
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify *password* against *hashed*; digests are compared in constant time."""
    return pwd_context.verify(password, hashed)


# -----------------------------
# Admin shared secret
# -----------------------------


class AdminGuard:
    """Checks requests against the configured admin password.

    The guard stores only a hash of the password. Without a configured
    password every check fails.
    """

    def __init__(self, password: Optional[str]):
        self._hash: Optional[str] = hash_password(password) if password else None
        if self._hash is None:
            logger.warning("No admin password configured; admin endpoints are disabled")

    @property
    def enabled(self) -> bool:
        return self._hash is not None

    def _matches(self, attempt: Any) -> bool:
        if self._hash is None or not isinstance(attempt, str):
            return False
        try:
            return verify_password(attempt, self._hash)
        except PasswordSizeError:
            return False

    def check(self, attempt: Any) -> None:
        """Raise :class:`Unauthorized` unless *attempt* matches the admin password."""
        if not self._matches(attempt):
            logger.warning("Rejected admin request: invalid password")
            raise Unauthorized()


# -----------------------------
# FastAPI dependency helpers
# -----------------------------


def get_admin_guard(request: Request) -> AdminGuard:
    return request.app.state.admin_guard


__all__ = [
    "pwd_context",
    "hash_password",
    "verify_password",
    "AdminGuard",
    "get_admin_guard",
]
