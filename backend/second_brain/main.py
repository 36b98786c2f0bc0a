"""FastAPI application entry point"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import init_db, close_db
from .logging_config import setup_logging
from .api import api_router
from .middleware.error_handler import setup_exception_handlers
from .utils.security import TokenService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    setup_logging(settings)
    await init_db()

    # Signing secret is read once here and stays fixed for the process lifetime
    app.state.token_service = TokenService.from_settings(settings)

    logger.info(f"{settings.APP_NAME} v{settings.APP_VERSION} started")
    yield

    await close_db()
    logger.info("Shutdown complete")


# Create the app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Bookmarks with public share links",
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Routes
app.include_router(api_router)


@app.get("/health", tags=["system"], summary="Health check")
async def health_check():
    """Service status"""
    return {
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION
    }
