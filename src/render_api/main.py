"""FastAPI application serving negotiated responses."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from render import RenderException, default_registry, settings

from .responses import negotiated
from .routes import renderers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan: startup and shutdown.

    Startup validates settings and logs the registered content types.
    Renderers must be registered before this runs.

    Raises:
        ValueError: If settings are invalid
    """
    try:
        logger.info("Starting Render API")
        settings.validate()
        logger.info(f"Registered content types: {', '.join(default_registry.content_types)}")
        logger.info(f"Error message style: {settings.ERROR_MESSAGE_STYLE}")

        yield

    except Exception as startup_error:
        logger.critical(f"Application startup failed: {startup_error}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down Render API")


async def render_exception_handler(request: Request, exc: RenderException) -> JSONResponse:
    """Log rendering failures and answer with a plain 500."""
    logger.error(f"Rendering failed ({exc.error_code}): {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "error_code": exc.error_code},
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""

    app = FastAPI(
        title="Render API",
        description="Content-negotiated responses for registered renderers",
        version="1.0.0",
        lifespan=lifespan
    )

    allowed_origins = [origin.strip() for origin in settings.ALLOWED_ORIGINS.split(",")]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RenderException, render_exception_handler)

    app.include_router(renderers.router, prefix="/api")

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        return negotiated(request, 200, {
            "status": "healthy",
            "service": "Render API",
            "version": "1.0.0",
        })

    return app


app = create_app()
