import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import install_error_handlers
from app.api.http import (
    admin_blog_router,
    admin_router,
    attorneys_router,
    blog_router,
    health_router,
    legal_content_router,
    media_router,
    services_router,
)
from app.core.config import Settings, settings as default_settings
from app.core.db import Database
from app.infrastructure.blob_storage import VercelBlobStore
from app.infrastructure.clerk import ClerkClient

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
    identity_provider=None,
    blob_store=None,
) -> FastAPI:
    """Fábrica de la aplicación; las dependencias externas se pueden inyectar"""
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    database = database or Database(settings.database_url, echo=settings.database_echo)
    identity_provider = identity_provider or ClerkClient.from_settings(settings)
    blob_store = blob_store or VercelBlobStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await database.create_all()
        logger.info("Altum Legal API lista")
        yield
        await identity_provider.aclose()
        await blob_store.aclose()
        await database.dispose()

    app = FastAPI(
        title="Altum Legal API",
        description="API de contenidos del sitio de Altum Legal: abogados, servicios, blog y textos legales",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database
    app.state.identity_provider = identity_provider
    app.state.blob_store = blob_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app)

    app.include_router(health_router)
    app.include_router(attorneys_router)
    app.include_router(services_router)
    app.include_router(blog_router)
    app.include_router(admin_blog_router)
    app.include_router(admin_router)
    app.include_router(media_router)
    app.include_router(legal_content_router)

    @app.get("/")
    async def root():
        return {
            "message": "Altum Legal API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    return app


app = create_app()
