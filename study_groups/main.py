"""
Main FastAPI application entry point.

This module creates the FastAPI application instance and configures
all routes, middleware, error handlers and application lifecycle events.
The application is the host for the group services: it creates one
GroupStore and keeps it alive for the lifetime of the process.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn
from typing import AsyncGenerator

from study_groups import __version__
from study_groups.config.settings import Settings, settings as default_settings
from study_groups.core.clock import Clock
from study_groups.core.seed import DataSeeder
from study_groups.api.routes import groups
from study_groups.services.base import (
    ServiceError, ValidationError, NotFoundError, MembershipError, CapacityError
)
from study_groups.services.domain.group_store import GroupStore
from study_groups.services.domain.message_view import MessageView

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    MembershipError: status.HTTP_403_FORBIDDEN,
    CapacityError: status.HTTP_409_CONFLICT,
}


def configure_logging(log_level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


def create_app(app_settings: Settings = None, clock: Clock = None) -> FastAPI:
    """
    Build the FastAPI application and its group services.

    Each call creates a fresh, empty GroupStore.
    """
    app_settings = app_settings or default_settings

    group_store = GroupStore(clock=clock)
    group_store.initialize({
        "max_group_members": app_settings.max_group_members,
        "min_group_name_length": app_settings.min_group_name_length,
        "max_group_name_length": app_settings.max_group_name_length,
        "max_message_length": app_settings.max_message_length,
    })
    message_view = MessageView(group_store)
    message_view.initialize()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Application lifespan manager.

        Loads demo data on startup when enabled.
        """
        logger.info(f"Starting {app_settings.project_name} API...")

        if app_settings.seed_demo_data:
            DataSeeder(group_store).run_full_seed(
                groups_count=app_settings.seed_group_count,
                messages_per_group=app_settings.seed_messages_per_group
            )

        logger.info(f"{app_settings.project_name} API ready, docs at /docs")

        yield

        logger.info(f"Shutting down {app_settings.project_name} API...")

    app = FastAPI(
        title=app_settings.project_name,
        description="""
    ## Study Groups API

    Discussion groups for study sessions.

    - **Groups**: create a group, list groups, view a group
    - **Membership**: join a group (idempotent, bounded membership)
    - **Discussions**: post messages as a member, page through a group's messages

    The caller is identified by the `X-Principal` header.
    """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{app_settings.api_v1_str}/openapi.json",
        lifespan=lifespan
    )

    app.state.settings = app_settings
    app.state.group_store = group_store
    app.state.message_view = message_view

    # Configure CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if app_settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        """Map domain errors to HTTP responses."""
        status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
        return JSONResponse(
            status_code=status_code,
            content={
                "error": exc.error_code,
                "detail": exc.message,
                "details": exc.details
            }
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Global exception handler for unhandled errors.

        Provides consistent error responses and logging for debugging.
        """
        logger.exception(f"Unhandled error on {request.method} {request.url}")
        error_detail = str(exc) if app_settings.debug else "Internal server error"

        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": error_detail,
                "path": str(request.url),
                "method": request.method
            }
        )

    @app.get("/", tags=["System"])
    async def root():
        """
        Root endpoint providing API information.

        Returns:
            Dict containing API information and available endpoints
        """
        return {
            "message": f"Welcome to {app_settings.project_name}",
            "version": __version__,
            "status": "operational",
            "documentation": {
                "interactive": "/docs",
                "alternative": "/redoc",
                "openapi_spec": f"{app_settings.api_v1_str}/openapi.json"
            },
            "endpoints": {
                "groups": f"{app_settings.api_v1_str}/groups"
            },
            "limits": {
                "max_group_members": app_settings.max_group_members,
                "group_name_length": [app_settings.min_group_name_length, app_settings.max_group_name_length],
                "max_message_length": app_settings.max_message_length
            }
        }

    @app.get("/health", tags=["System"])
    def health_check():
        """
        Health check endpoint for monitoring and load balancers.

        Returns:
            Dict containing application health status and store size
        """
        count_result = group_store.count_groups()
        return {
            "status": "healthy" if count_result.success else "unhealthy",
            "version": __version__,
            "environment": "development" if app_settings.debug else "production",
            "groups": count_result.data if count_result.success else 0
        }

    app.include_router(
        groups.router,
        prefix=f"{app_settings.api_v1_str}/groups",
        tags=["Groups"]
    )

    return app


configure_logging(default_settings.log_level)

# Create FastAPI application instance
app = create_app()


# Development server entry point
if __name__ == "__main__":
    uvicorn.run(
        "study_groups.main:app",
        host="0.0.0.0",
        port=8000,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower()
    )
