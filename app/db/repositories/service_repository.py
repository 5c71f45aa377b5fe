from typing import List, Optional

from sqlalchemy import delete, func, select, update

from app.db.models.service import Service as ServiceModel
from app.db.repositories.base import BaseRepository, repository_operation
from app.domains.legal_services.entities import Service


class ServiceRepository(BaseRepository):
    """Repositorio de servicios legales"""

    @repository_operation
    async def find_by_id(self, service_id: str) -> Optional[Service]:
        result = await self.session.execute(select(ServiceModel).where(ServiceModel.id == service_id))
        db_service = result.scalar_one_or_none()
        return self._to_domain(db_service) if db_service else None

    @repository_operation
    async def find_by_slug(self, slug: str) -> Optional[Service]:
        """El slug es el nombre con guiones en lugar de espacios"""
        name = slug.replace("-", " ").lower()
        result = await self.session.execute(
            select(ServiceModel).where(func.lower(ServiceModel.name) == name).limit(1)
        )
        db_service = result.scalar_one_or_none()
        return self._to_domain(db_service) if db_service else None

    @repository_operation
    async def find_all(self) -> List[Service]:
        result = await self.session.execute(select(ServiceModel).order_by(ServiceModel.order.asc()))
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def find_active(self) -> List[Service]:
        result = await self.session.execute(
            select(ServiceModel).where(ServiceModel.is_active.is_(True)).order_by(ServiceModel.order.asc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def find_by_parent_id(self, parent_id: Optional[str]) -> List[Service]:
        """Hijos activos de un servicio; con None, los servicios raíz activos"""
        query = select(ServiceModel).where(ServiceModel.is_active.is_(True))
        if parent_id:
            query = query.where(ServiceModel.parent_id == parent_id)
        else:
            query = query.where(ServiceModel.parent_id.is_(None))
        result = await self.session.execute(query.order_by(ServiceModel.order.asc()))
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def count_children(self, parent_id: str) -> int:
        """Hijos de un servicio, activos o no"""
        result = await self.session.execute(
            select(func.count()).select_from(ServiceModel).where(ServiceModel.parent_id == parent_id)
        )
        return result.scalar_one()

    async def find_parent_services(self) -> List[Service]:
        return await self.find_by_parent_id(None)

    @repository_operation
    async def save(self, service: Service) -> Service:
        db_service = ServiceModel(**self._to_persistence(service))
        self.session.add(db_service)
        await self.session.commit()
        await self.session.refresh(db_service)
        return self._to_domain(db_service)

    @repository_operation
    async def update(self, service: Service) -> Optional[Service]:
        values = self._to_persistence(service)
        values.pop("id")
        values.pop("created_at")
        await self.session.execute(update(ServiceModel).where(ServiceModel.id == service.id).values(**values))
        await self.session.commit()
        return await self.find_by_id(service.id)

    @repository_operation
    async def delete(self, service_id: str) -> bool:
        result = await self.session.execute(delete(ServiceModel).where(ServiceModel.id == service_id))
        await self.session.commit()
        return result.rowcount > 0

    def _to_persistence(self, service: Service) -> dict:
        return {
            "id": service.id,
            "name": service.name,
            "description": service.description,
            "short_description": service.short_description,
            "icon_url": service.icon_url,
            "parent_id": service.parent_id,
            "order": service.order,
            "is_active": service.is_active,
            "created_at": service.created_at,
            "updated_at": service.updated_at,
        }

    def _to_domain(self, db_service: ServiceModel) -> Service:
        return Service(
            id=db_service.id,
            name=db_service.name,
            description=db_service.description,
            short_description=db_service.short_description,
            icon_url=db_service.icon_url,
            parent_id=db_service.parent_id,
            order=db_service.order,
            is_active=db_service.is_active,
            created_at=db_service.created_at,
            updated_at=db_service.updated_at,
        )
