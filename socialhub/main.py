import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from .config import settings
from .infrastructure.logging import configure_logging
from .presentation.api.dependencies import get_publisher
from .presentation.api.v1 import ads, analytics, health, publishing
from .presentation.middleware import CorrelationIdMiddleware

configure_logging(settings.service_name, level=logging.DEBUG if settings.debug else logging.INFO)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting application", service=settings.service_name, ga4_enabled=settings.ga4_enabled)

    yield

    # Let in-flight attribution events finish before exit
    publisher = get_publisher()
    pending = publisher.extended.pending_tasks
    if pending:
        logger.info("Draining attribution tasks", pending=pending)
        await publisher.extended.drain()
    logger.info("Application shutdown complete")


app = FastAPI(
    title="SocialHub API",
    description="Publish to social platforms and aggregate ad reporting",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(CorrelationIdMiddleware)

app.include_router(health.router)
app.include_router(publishing.router, prefix="/api/v1")
app.include_router(ads.router, prefix="/api/v1")
app.include_router(analytics.router, prefix="/api/v1")


@app.get("/")
def root() -> dict:
    return {
        "service": settings.service_name,
        "version": "0.1.0",
        "docs": "/docs",
    }
