"""FastAPI dependency injection."""

import structlog
from fastapi import Request

from config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_log(request: Request) -> structlog.BoundLogger:
    return request.app.state.log
