from typing import List, Optional

from sqlalchemy import select

from app.db.models.legal import LegalContent as LegalContentModel
from app.db.repositories.base import BaseRepository, repository_operation
from app.domains.legal.entities import LegalContent, LegalContentType


class LegalContentRepository(BaseRepository):
    """Repositorio de textos legales; uno por tipo"""

    @repository_operation
    async def find_all(self) -> List[LegalContent]:
        result = await self.session.execute(select(LegalContentModel).order_by(LegalContentModel.type.asc()))
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def find_by_type(self, content_type: LegalContentType) -> Optional[LegalContent]:
        result = await self.session.execute(
            select(LegalContentModel).where(LegalContentModel.type == LegalContentType(content_type).value)
        )
        db_content = result.scalar_one_or_none()
        return self._to_domain(db_content) if db_content else None

    @repository_operation
    async def find_active_banners(self) -> List[LegalContent]:
        result = await self.session.execute(
            select(LegalContentModel).where(LegalContentModel.banner_active.is_(True))
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def insert_many(self, contents: List[LegalContent]) -> List[LegalContent]:
        db_contents = [LegalContentModel(**self._to_persistence(content)) for content in contents]
        self.session.add_all(db_contents)
        await self.session.commit()
        return contents

    @repository_operation
    async def upsert(self, content: LegalContent) -> LegalContent:
        """Crea o reemplaza el texto de ese tipo"""
        result = await self.session.execute(
            select(LegalContentModel).where(LegalContentModel.type == content.type.value)
        )
        db_content = result.scalar_one_or_none()

        if db_content is None:
            db_content = LegalContentModel(**self._to_persistence(content))
            self.session.add(db_content)
        else:
            db_content.title = content.title
            db_content.content = content.content
            db_content.banner_text = content.banner_text
            db_content.banner_active = content.banner_active
            db_content.updated_at = content.last_updated

        await self.session.commit()
        await self.session.refresh(db_content)
        return self._to_domain(db_content)

    def _to_persistence(self, content: LegalContent) -> dict:
        return {
            "id": content.id,
            "type": content.type.value,
            "title": content.title,
            "content": content.content,
            "banner_text": content.banner_text,
            "banner_active": content.banner_active,
            "created_at": content.last_updated,
            "updated_at": content.last_updated,
        }

    def _to_domain(self, db_content: LegalContentModel) -> LegalContent:
        return LegalContent(
            id=db_content.id,
            type=LegalContentType(db_content.type),
            title=db_content.title,
            content=db_content.content,
            banner_text=db_content.banner_text,
            banner_active=db_content.banner_active,
            last_updated=db_content.updated_at,
        )
