"""
Sweeper API Application

Main FastAPI application entry point.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sweeper import __version__
from sweeper.config import get_settings
from sweeper.api.routes import get_api_router
from sweeper.services.detection import get_detection_engine, init_custom_rule_store
from sweeper.services.ai import ModelStatus, init_model_overlay

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.app_name} API...")

    engine = get_detection_engine()
    init_custom_rule_store(settings.custom_rules_path, engine)

    summary = engine.get_rule_summary()["tables"]
    logger.info(
        f"Detection engine initialized: {summary['high_risk_urls']} high-risk URLs, "
        f"{summary['medium_risk_urls']} medium-risk URLs, {summary['keywords']} keywords, "
        f"{summary['regex_rules']} regex rules"
    )

    overlay = init_model_overlay(settings)
    if overlay.is_enabled():
        status = await overlay.provider.check_availability()
        if status != ModelStatus.AVAILABLE:
            logger.warning(
                f"Model overlay enabled but model not ready: {overlay.provider.status_message}"
            )

    logger.info(f"{settings.app_name} API started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name} API...")
    if overlay.provider is not None:
        await overlay.provider.close()
    logger.info(f"{settings.app_name} API shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Sweeper API",
    description="Spam classification for direct messages",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Include API routes
app.include_router(get_api_router())


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": "Sweeper API",
        "description": "Spam classification for direct messages",
        "version": __version__,
        "docs": "/docs",
    }


# Error handlers
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if settings.debug else "An error occurred",
        },
    )


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run(
        "sweeper.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
