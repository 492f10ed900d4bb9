from __future__ import annotations

import resource
import sys
import time
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends, Request

from ..schemas import ServerStatus
from ..state import get_store
from ..store import RoomStore

router = APIRouter(prefix="/api", tags=["status"])


def _memory_usage() -> Dict[str, int]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    # ru_maxrss is reported in bytes on macOS and kilobytes elsewhere
    scale = 1 if sys.platform == "darwin" else 1024
    return {"maxRss": usage.ru_maxrss * scale}


@router.get("/status", response_model=ServerStatus)
async def server_status(request: Request, store: RoomStore = Depends(get_store)):
    return ServerStatus(
        totalRooms=len(store),
        uptime=time.monotonic() - request.app.state.started_at,
        memory=_memory_usage(),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
