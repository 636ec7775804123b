import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from .app_settings import app_settings

from .routes import charts, health

logging.basicConfig(level=getattr(logging, app_settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Starting Aquaponics Charts Service")
    logger.info(
        f"Point budget {app_settings.default_points}, sampling floor {app_settings.sampling_floor}, "
        f"labels in {app_settings.display_timezone} ({app_settings.display_locale})"
    )
    yield
    logger.info("Shutting down Aquaponics Charts Service")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title="Aquaponics Charts API",
        version="0.1.0",
        description="Chart shaping service for aquaponics sensor readings",
        lifespan=lifespan,
        debug=app_settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # GZip middleware
    if app_settings.gzip_enabled:
        app.add_middleware(
            GZipMiddleware,
            minimum_size=app_settings.gzip_min_size,
            compresslevel=app_settings.gzip_level,
        )

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(charts.router, tags=["Charts"])

    return app


# Application instance
app = create_app()


def main():
    """Run the service with uvicorn."""
    import uvicorn

    uvicorn.run("aquaponics_charts.app:app", host="0.0.0.0", port=8000)
