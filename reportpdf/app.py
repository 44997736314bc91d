"""
Application factory - builds FastAPI app with all middleware and routes.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reportpdf import __version__
from reportpdf.config import Settings, get_settings, init_settings
from reportpdf.modules.convert.router import router as convert_router
from reportpdf.modules.health.router import router as health_router
from reportpdf.modules.render.router import router as render_router
from reportpdf.shared.errors import ReportPdfError
from reportpdf.shared.ids import generate_request_id
from reportpdf.shared.logging import (
    clear_request_context,
    get_logger,
    get_request_context,
    set_request_context,
    setup_logging,
)
from reportpdf.shared.types import RequestContext

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()

    setup_logging(settings.log_level)
    logger.info("Starting reportpdf...")
    logger.info(f"Browsers directory: {settings.get_browsers_path()}")

    yield

    logger.info("reportpdf stopped")


def build_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Optional settings override (useful for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()
    else:
        init_settings(settings)

    app = FastAPI(
        title="reportpdf",
        description="Fill HTML report templates and render them to PDF",
        version=__version__,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Request context middleware
    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next: Any) -> Response:
        """Attach request context for logging and tracing."""
        ctx = RequestContext(
            request_id=request.headers.get("X-Request-ID", generate_request_id()),
        )
        set_request_context(ctx)

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = ctx.request_id
            return response
        finally:
            clear_request_context()

    # Exception handler for ReportPdfError
    @app.exception_handler(ReportPdfError)
    async def reportpdf_error_handler(
        request: Request, exc: ReportPdfError
    ) -> JSONResponse:
        """Handle ReportPdfError with consistent JSON response."""
        ctx = get_request_context()
        request_id = ctx.request_id if ctx else request.headers.get("X-Request-ID")

        return JSONResponse(
            status_code=exc.http_status,
            content={
                "error": exc.to_dict(),
                "request_id": request_id,
            },
            headers={"X-Request-ID": request_id} if request_id else None,
        )

    # Register routers
    app.include_router(health_router, tags=["health"])
    app.include_router(convert_router)
    app.include_router(render_router)

    # Root endpoint
    @app.get("/")
    async def root() -> dict[str, str]:
        return {"service": "reportpdf", "version": __version__}

    return app
