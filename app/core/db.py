import logging
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

# Clase base para los modelos
Base = declarative_base()


class Database:
    """Motor y fábrica de sesiones; la aplicación crea uno solo"""

    def __init__(self, url: str, echo: bool = False, engine: Optional[AsyncEngine] = None):
        self.url = url
        self.engine = engine or create_async_engine(url, future=True, echo=echo)
        self.session_factory = async_sessionmaker(
            bind=self.engine, class_=AsyncSession, expire_on_commit=False
        )

    async def create_all(self) -> None:
        """Crea las tablas que falten"""
        # Importar modelos para registrarlos en Base.metadata
        import app.db.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Esquema verificado en %s", self.engine.url.render_as_string(hide_password=True))

    async def dispose(self) -> None:
        await self.engine.dispose()


# Dependencia de FastAPI: una sesión nueva por petición
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        yield session
