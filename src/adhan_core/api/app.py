"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adhan_core import __version__
from adhan_core.api.dependencies import initialize_app_state
from adhan_core.api.routes import router as api_router
from adhan_core.config import AppConfig
from adhan_core.domain.errors import AdhanError, InternalInconsistency

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    logger.info("Adhan-Core başlatılıyor...")
    app.state.adhan = initialize_app_state(getattr(app.state, "config", None))
    logger.info("Adhan-Core hazır!")

    yield

    # Shutdown
    logger.info("Adhan-Core kapatılıyor...")
    app.state.adhan = None


async def adhan_error_handler(request: Request, exc: AdhanError) -> JSONResponse:
    """Hesaplama hatalarını {kind, message} olarak döndür."""
    if isinstance(exc, InternalInconsistency):
        logger.error(f"Tutarsız hesaplama ({request.url.path}): {exc.message}")
        status_code = 500
    else:
        logger.info(f"İstek reddedildi ({request.url.path}): {exc.kind} - {exc.message}")
        status_code = 422
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    Create FastAPI application.

    Args:
        config: Uygulama yapılandırması (varsayılan: ortam değişkenleri)

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Adhan-Core",
        description="Namaz vakti, kıble ve güneş konumu hesaplama servisi",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config in app state
    app.state.config = config

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AdhanError, adhan_error_handler)

    # API routes
    app.include_router(api_router, prefix="/api")

    # Health check
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
