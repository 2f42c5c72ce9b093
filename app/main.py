from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.api.router import api_router
from app.core.config import settings
from app.core.db import init_models
from app.core.logging import setup_logging
from app.core.middleware import RateLimitMiddleware, RequestSizeLimitMiddleware, SecurityHeadersMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.database_auto_create:
        await init_models()
    logger.info("CMS API started (%s)", settings.environment)
    yield


def create_app() -> FastAPI:
    setup_logging(settings.log_level, "json" if settings.is_production else settings.log_format)

    app = FastAPI(
        title="Site CMS",
        description="Бэкенд CMS для маркетингового сайта",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(RequestSizeLimitMiddleware, max_size=settings.max_request_size)
    app.add_middleware(
        RateLimitMiddleware,
        limit=settings.rate_limit_max,
        window=settings.rate_limit_window_seconds,
        path_prefix=settings.api_prefix,
        trust_proxy=settings.trust_proxy
    )
    app.add_middleware(SecurityHeadersMiddleware)

    # Настройка CORS для работы с frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Загруженные файлы раздаются как статика
    os.makedirs(settings.upload_dir, exist_ok=True)
    app.mount(settings.upload_url_prefix, StaticFiles(directory=settings.upload_dir), name="uploads")

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "success": True,
            "message": "CMS API",
            "data": {"version": app.version, "docs": "/docs"}
        }

    return app


app = create_app()
