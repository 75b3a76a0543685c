"""FastAPI application factory with lifespan management."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import Settings, configure_logging
from api.routers import analysis, health


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and configure logging once per process; request options are layered on top."""
    settings = Settings()
    app.state.settings = settings
    app.state.log = configure_logging("trend-api", settings.log_level, settings.log_format)
    app.state.start_time = time.time()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Trend Analyzer API",
        version="1.0.0",
        description="Batch time-series analysis: statistics, trend, forecast, anomalies, seasonality",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(health.router)
    app.include_router(analysis.router)

    return app


app = create_app()
