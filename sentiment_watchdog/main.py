"""Sentiment Watchdog — FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sentiment_watchdog.config import settings
from sentiment_watchdog.domain.errors import WatchdogError
from sentiment_watchdog.infrastructure.api.routes_alerts import router as alerts_router
from sentiment_watchdog.infrastructure.api.routes_analysis import router as analysis_router
from sentiment_watchdog.infrastructure.api.routes_export import router as export_router
from sentiment_watchdog.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


async def watchdog_error_handler(request: Request, exc: WatchdogError) -> JSONResponse:
    """Client mistakes (missing text, unknown export format) become 400s."""
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": str(exc)})


def create_app() -> FastAPI:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Sentiment Watchdog Pro",
        description="Keyword sentiment scoring, brand-mention triage, alerts and exports",
        version="0.1.0",
    )

    # CORS for the dashboard frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(WatchdogError, watchdog_error_handler)

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(analysis_router, prefix="/api")
    app.include_router(alerts_router, prefix="/api")
    app.include_router(export_router, prefix="/api")

    return app


app = create_app()
