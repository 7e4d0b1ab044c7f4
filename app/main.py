"""
FastAPI application for the Lift Log workout tracker.
"""
import logging

from fastapi import FastAPI

from app.api.endpoints import router
from app.core.config import settings
from app.core.cors import cors_middleware
from app.core.errors import register_exception_handlers

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    application = FastAPI(title=settings.PROJECT_NAME, version=settings.VERSION)
    application.middleware("http")(cors_middleware)
    register_exception_handlers(application)
    application.include_router(router, prefix=settings.API_PREFIX)
    logger.info("%s %s ready, API mounted at %r", settings.PROJECT_NAME, settings.VERSION, settings.API_PREFIX)
    return application


app = create_app()
