"""
FastAPI application entry point.

Ties together:
- API routes for invoices and the batch send
- Database lifecycle management
- Error handling and logging
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from invoicesync import __version__
from invoicesync.api.routes import debug, health, invoices
from invoicesync.api.schemas import ErrorResponse
from invoicesync.config import get_settings
from invoicesync.domain.models import LOW_VALUE_THRESHOLD
from invoicesync.infrastructure.database import close_db, init_db

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Creates the invoice tables on startup and disposes the engine on shutdown.
    """
    settings = get_settings()

    logger.info(f"Starting invoicesync v{__version__}")
    logger.info(f"Low-value threshold: {LOW_VALUE_THRESHOLD}")
    if not settings.accounting_configured:
        logger.warning("ACCOUNTING_API_URL not set; batch send is unavailable")

    init_db()

    yield  # Application runs here

    logger.info("Shutting down invoicesync")
    close_db()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance ready to serve requests.
    """
    settings = get_settings()

    app = FastAPI(
        title="invoicesync API",
        description="Forwards low-value invoices to the accounting system.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.include_router(health.router)
    app.include_router(invoices.router, prefix="/api/v1")

    # Debug router (only in debug mode)
    if settings.debug:
        app.include_router(debug.router, prefix="/api/v1")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch-all exception handler for unhandled errors."""
        logger.exception(f"Unhandled error: {exc}")

        # Don't expose internal errors in production
        if settings.debug:
            detail = str(exc)
        else:
            detail = "An internal error occurred"

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="Internal Server Error",
                detail=detail,
            ).model_dump(exclude_none=True),
        )

    return app


# Create the application instance
app = create_app()


# Development server entry point
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "invoicesync.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
