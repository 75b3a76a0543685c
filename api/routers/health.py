"""Health check endpoint."""

import time

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Liveness probe: returns 200 if the process is alive."""
    return {
        "status": "ok",
        "uptime_sec": round(time.time() - request.app.state.start_time, 3),
    }
