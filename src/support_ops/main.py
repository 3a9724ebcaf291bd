"""
Payment Support Ops API - Main Application
===========================================

Read-only reporting API over support tickets and service logs.

Modules:
- Overview: Summary, daily support trend, daily service trend
- Tickets: Listing, detail, event and message history
- Logs: Top error signatures, hourly latency trend

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Pure computations (SLA timings, percentiles)
- Infrastructure: Database, query builders
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

# Configuration
from support_ops.config import Settings, get_settings

# Infrastructure
from support_ops.infrastructure.database import Database

# Module Routers
from support_ops.logs.interfaces import logs_router
from support_ops.overview.interfaces import overview_router
from support_ops.tickets.interfaces import tickets_router

# Shared API
from support_ops.shared.api.errors import register_exception_handlers
from support_ops.shared.api.middleware import CorrelationIDMiddleware, LoggingMiddleware

# Logging
from support_ops.shared.infrastructure.logging import get_logger, setup_logging

logger = get_logger(__name__)

ENDPOINTS = [
    "GET /api/overview/summary?from=&to=",
    "GET /api/overview/support-trend?from=&to=",
    "GET /api/overview/service-trend?from=&to=",
    "GET /api/tickets?status=&channel=&priority=&issueType=&from=&to=&page=&pageSize=",
    "GET /api/tickets/:ticketId",
    "GET /api/tickets/:ticketId/events",
    "GET /api/tickets/:ticketId/messages",
    "GET /api/logs/errors/top?from=&to=&service=",
    "GET /api/logs/latency/trend?from=&to=&service=&endpoint=",
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Create the database engine and pool
    3. Check connectivity (a failure is logged, not fatal)

    SHUTDOWN:
    1. Dispose pooled connections
    """
    settings: Settings = app.state.settings

    # === STARTUP ===
    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting Support Ops API", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    database = Database.from_settings(settings)
    app.state.database = database

    try:
        await database.ping()
        logger.info("Database connection verified")
    except Exception as e:
        # Requests will surface the failure as "Database connection failed"
        logger.warning(
            "Database not available - running in degraded mode",
            extra={"error": str(e)}
        )

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("Shutting down Support Ops API")
    await database.dispose()
    logger.info("Support Ops API shutdown complete")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the FastAPI application with middleware, handlers and routes."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Payment Support Ops API",
        description="""
        ## Support operations reporting

        Read-only metrics and record listings over support tickets and
        service log events.

        - `/api/overview/*` - summary and daily trends (`from`/`to` required)
        - `/api/tickets` - filtered, paginated ticket listing and history
        - `/api/logs/*` - top errors and hourly latency (`from`/`to` required)

        Dates are ISO 8601. Windows are half-open: `from <= t < to`.
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.settings = settings

    # === CORS Middleware ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # === Custom Middleware (last added runs first) ===
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    register_exception_handlers(app)

    # === Include Module Routers ===
    app.include_router(overview_router)
    app.include_router(tickets_router)
    app.include_router(logs_router)

    # === Health Check Endpoint ===

    @app.get("/health", tags=["Health"], responses={
        200: {
            "description": "Process is up",
            "content": {
                "application/json": {
                    "example": {
                        "status": "ok",
                        "timestamp": "2024-01-15T10:00:00+00:00",
                        "version": "1.0.0",
                        "environment": "development"
                    }
                }
            }
        }
    })
    async def health_check(request: Request):
        """Liveness check. Does not touch the database."""
        app_settings = request.app.state.settings
        return {
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": app_settings.app_version,
            "environment": app_settings.environment,
        }

    @app.get("/", tags=["Root"])
    async def root(request: Request):
        """Root endpoint listing the available reports."""
        return {
            "success": True,
            "message": "Payment Support Ops API",
            "version": request.app.state.settings.app_version,
            "health": "/health",
            "docs": "/docs",
            "endpoints": ENDPOINTS,
        }

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "support_ops.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
