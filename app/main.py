# /halaqat-backend/app/main.py

# --- Core FastAPI Imports ---
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# --- Application-specific Imports ---
from .core import messages
from .core.config import get_settings
from .core.logging_config import setup_logging
from .routers import (
    auth_router,
    parents_router,
    quran_errors_router,
    records_router,
    students_router,
    teachers_router,
)
from .services.database_helpers.base_repository import BaseRepository
from .services.database_service import create_repository

logger = logging.getLogger(__name__)


# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once at startup: the repository is built here and shared by
    # every request through `get_db_service`.
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    owns_repository = getattr(app.state, "repository", None) is None
    if owns_repository:
        app.state.repository = create_repository(settings)
    logger.info("Storage backend: %s", app.state.repository.backend_name)
    yield
    # Runs once at shutdown.
    if owns_repository:
        app.state.repository.close()


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": messages.INVALID_DATA, "errors": errors},
    )


def create_app(repository: Optional[BaseRepository] = None) -> FastAPI:
    """
    Builds the application. Passing a repository skips backend selection;
    the caller keeps ownership of it and the app will not close it.
    """
    app = FastAPI(
        title="Halaqat Backend API",
        description="Records and progress tracking for Quran memorization circles.",
        version="1.0.0",
        lifespan=lifespan,
    )
    if repository is not None:
        app.state.repository = repository

    # --- Middleware Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # --- API Router Inclusion ---
    app.include_router(auth_router.router, prefix="/api/auth", tags=["Auth"])
    app.include_router(teachers_router.router, prefix="/api/teachers", tags=["Teachers"])
    app.include_router(students_router.router, prefix="/api/students", tags=["Students"])
    app.include_router(records_router.router, prefix="/api/records", tags=["Daily Records"])
    app.include_router(quran_errors_router.router, prefix="/api/quran-errors", tags=["Quran Errors"])
    app.include_router(parents_router.router, prefix="/api/parents", tags=["Parents"])

    # --- Root / Health Check Endpoint ---
    @app.get("/", tags=["Health Check"])
    async def read_root():
        """A simple health check endpoint to confirm the API is online."""
        return {"status": "Halaqat Backend is running!", "version": app.version}

    return app


app = create_app()
