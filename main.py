#!/usr/bin/env python3

"""
Main application entry point for the Taskboard task-tracking service.

Architecture: FastAPI application over an async SQLAlchemy store.
Key Features: Lifecycle management, database health checks, error mapping,
CORS configuration, Prometheus metrics.
"""

import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from taskboard.api.admin import router as admin_router
from taskboard.api.auth import router as auth_router
from taskboard.api.health import router as health_router
from taskboard.api.tasks import router as tasks_router
from taskboard.config import Settings, settings
from taskboard.db import (
    check_db_connection,
    close_db,
    create_engine_from_settings,
    create_session_factory,
    init_db,
)
from taskboard.errors import ServiceError
from taskboard.telemetry import install_metrics
from taskboard.utils.logger import setup_logger

logger = setup_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the shared database engine once, expose its session factory on
    ``app.state`` and dispose of it at shutdown.
    """
    logger.info("Application startup...")
    app_settings: Settings = app.state.settings
    try:
        engine = create_engine_from_settings(app_settings)

        logger.info("Initializing database...")
        await init_db(engine)
        logger.info("Database initialization complete.")

        logger.info("Checking database connectivity...")
        if await check_db_connection(engine):
            logger.info("Database connectivity confirmed.")
        else:
            logger.critical("Database connectivity check failed.")
            raise SystemExit("Database connection failed.")

    except Exception as e:
        logger.critical(f"Startup error: {e}")
        raise SystemExit(f"Startup failed: {e}") from e

    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Taskboard API startup successful.")

    yield

    logger.info("Taskboard API shutdown...")
    await close_db(engine)
    logger.info("Shutdown complete.")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings

    app = FastAPI(title="Taskboard API", lifespan=lifespan)
    app.state.settings = app_settings

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(tasks_router)
    if app_settings.admin_enabled:
        app.include_router(admin_router)
    else:
        logger.info("Admin routes disabled")

    if app_settings.metrics_enabled:
        install_metrics(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )

    return app


app = create_app()


def main():
    port = int(settings.server_port)
    host = settings.server_host

    logger.info(f"Starting Taskboard API server on {host}:{port}")

    try:
        uvicorn.run(app, host=host, port=port)
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
