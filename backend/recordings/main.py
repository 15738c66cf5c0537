"""Recordings API - Main application entry point."""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from recordings import __version__
from recordings.api import api_router
from recordings.api.health import router as health_router
from recordings.config import Settings, get_settings
from recordings.database import create_db_engine, create_session_factory
from recordings.logging_config import setup_logging

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """404s carry a "message", every other failure an "error"."""
    key = "message" if exc.status_code == 404 else "error"
    return JSONResponse(
        status_code=exc.status_code,
        content={key: exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and parameters are client errors (400)."""
    return JSONResponse(status_code=400, content={"error": format_validation_errors(exc)})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API with its own engine and session factory."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Recordings",
        description="Album, artist and label catalog",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Each app owns its connection pool; handlers get sessions via get_db
    engine = create_db_engine(settings.store_url)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router)
    app.include_router(health_router)

    @app.get("/")
    def root():
        """Root endpoint - API info."""
        return {
            "name": "Recordings",
            "version": __version__,
            "docs": "/docs",
        }

    logger.info(f"Recordings API v{__version__} configured")
    return app


app = create_app()
