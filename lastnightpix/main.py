"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uvicorn, lastnightpix.api, lastnightpix.observability, lastnightpix.configs
System role: Application initialization and configuration
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lastnightpix import __version__
from lastnightpix.api.deps import get_service_cache
from lastnightpix.api.routers import (
    checkout_router,
    health_router,
    health_v1_router,
    images_router,
    matches_router,
    photos_router,
)
from lastnightpix.configs import get_settings
from lastnightpix.observability.logger import configure_logging
from lastnightpix.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and drops cached SDK clients on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    payments_configured = get_service_cache().payment_client.configured
    logger.info(
        "Application startup",
        extra={
            "environment": settings.environment,
            "bucket": settings.aws.bucket_name,
            "collection_id": settings.aws.collection_id,
            "payments_configured": payments_configured,
        },
    )
    if not payments_configured:
        logger.warning("STRIPE_SECRET is not set; checkout and download routes will fail")

    yield

    get_service_cache().clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="LastNightPix Photo API",
        description="Event photo upload, selfie matching and photo purchase",
        version=__version__,
        lifespan=lifespan,
    )

    # Observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID", "Content-Disposition"],
    )

    # Public routes stay at the root: the frontend and the generated
    # preview/proxy URLs reference these paths directly.
    app.include_router(health_router)
    app.include_router(photos_router)
    app.include_router(matches_router)
    app.include_router(images_router)
    app.include_router(checkout_router)

    app.include_router(health_v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "lastnightpix.main:app",
        host=settings.host,
        port=settings.port,
    )
