import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.legal_content_repository import LegalContentRepository
from app.domains.legal.entities import LegalContent, default_legal_contents
from app.domains.legal.schemas import LegalContentUpdate

logger = logging.getLogger(__name__)


class LegalContentService:
    """Términos y aviso de privacidad del sitio"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.legal_content_repository = LegalContentRepository(session)

    async def get_all(self) -> List[LegalContent]:
        """Todos los textos; siembra los tipos que falten con el texto por defecto"""
        contents = await self.legal_content_repository.find_all()
        existing = {content.type for content in contents}
        missing = [content for content in default_legal_contents() if content.type not in existing]
        if not missing:
            return contents

        logger.info("Contenido legal por defecto para: %s", ", ".join(c.type.value for c in missing))
        await self.legal_content_repository.insert_many(missing)
        return await self.legal_content_repository.find_all()

    async def get_active_banners(self) -> List[LegalContent]:
        return await self.legal_content_repository.find_active_banners()

    async def update(self, data: LegalContentUpdate) -> LegalContent:
        content = LegalContent(
            type=data.type,
            title=data.title,
            content=data.content,
            banner_text=data.banner_text,
            banner_active=data.banner_active,
        )
        saved = await self.legal_content_repository.upsert(content)
        logger.info("Contenido legal actualizado: %s", saved.type.value)
        return saved
