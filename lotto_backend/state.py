"""Accessors for the runtime singletons owned by the application.

``create_app`` builds the store, sweeper and admin guard and hangs them off
``app.state``; routers reach them through these dependencies instead of
importing module-level globals.
"""
from __future__ import annotations

from fastapi import Request

from .store import RoomStore
from .sweeper import RoomSweeper


def get_store(request: Request) -> RoomStore:
    return request.app.state.store


def get_sweeper(request: Request) -> RoomSweeper:
    return request.app.state.sweeper


__all__ = ["get_store", "get_sweeper"]
