import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.attorney_repository import AttorneyRepository
from app.db.repositories.service_repository import ServiceRepository
from app.domains.common.errors import DomainValidationError
from app.domains.legal_services.entities import Service
from app.domains.legal_services.matching import (
    ServiceNode,
    build_attorney_service_tree,
    match_attorneys_for_service,
)
from app.domains.legal_services.schemas import ServiceCreate, ServiceUpdate

logger = logging.getLogger(__name__)


class ServiceNotFoundError(LookupError):
    def __init__(self, service_id: str):
        super().__init__(f"Servicio {service_id} no encontrado")
        self.service_id = service_id


class LegalServiceService:
    """Catálogo de servicios legales y su relación con los abogados"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.service_repository = ServiceRepository(session)
        self.attorney_repository = AttorneyRepository(session)

    async def list_services(self, active_only: bool = True) -> List[Service]:
        if active_only:
            return await self.service_repository.find_active()
        return await self.service_repository.find_all()

    async def get_parent_services(self) -> List[Service]:
        return await self.service_repository.find_parent_services()

    async def get_children(self, parent_id: str) -> List[Service]:
        return await self.service_repository.find_by_parent_id(parent_id)

    async def get_service(self, id_or_slug: str) -> Service:
        service = await self.service_repository.find_by_id(id_or_slug)
        if service is None:
            service = await self.service_repository.find_by_slug(id_or_slug)
        if service is None:
            raise ServiceNotFoundError(id_or_slug)
        return service

    async def create_service(self, data: ServiceCreate) -> Service:
        if data.parent_id:
            await self._ensure_parent(data.parent_id)
        service = await self.service_repository.save(Service(**data.model_dump()))
        logger.info("Servicio creado: %s", service.name)
        return service

    async def update_service(self, service_id: str, data: ServiceUpdate) -> Service:
        service = await self.get_service(service_id)
        changes = data.model_dump(exclude_unset=True)

        if "name" in changes:
            service.update_name(changes["name"])
        if "description" in changes or "short_description" in changes:
            service.update_description(
                changes.get("description", service.description),
                changes.get("short_description", service.short_description),
            )
        if "icon_url" in changes:
            service.update_icon(changes["icon_url"])
        if "parent_id" in changes:
            if changes["parent_id"]:
                await self._ensure_parent(changes["parent_id"])
            service.update_parent(changes["parent_id"])
        if "order" in changes:
            service.update_order(changes["order"])
        if changes.get("is_active") is True:
            service.activate()
        elif changes.get("is_active") is False:
            service.deactivate()

        updated = await self.service_repository.update(service)
        if updated is None:
            raise ServiceNotFoundError(service_id)
        return updated

    async def delete_service(self, service_id: str) -> None:
        service = await self.get_service(service_id)
        if await self.service_repository.count_children(service.id):
            raise DomainValidationError("No se puede eliminar un servicio con subservicios")
        if not await self.service_repository.delete(service.id):
            raise ServiceNotFoundError(service_id)
        logger.info("Servicio eliminado: %s", service.id)

    async def get_attorneys_for_service(self, service_id: str):
        """Abogados activos que atienden el servicio"""
        service = await self.get_service(service_id)
        attorneys = await self.attorney_repository.find_active()
        return match_attorneys_for_service(service, attorneys)

    async def get_service_tree_for_attorney(self, attorney) -> List[ServiceNode]:
        services = await self.service_repository.find_active()
        return build_attorney_service_tree(attorney, services)

    async def _ensure_parent(self, parent_id: str) -> None:
        parent = await self.service_repository.find_by_id(parent_id)
        if parent is None:
            raise DomainValidationError(f"El servicio padre {parent_id} no existe")
        if parent.is_child:
            raise DomainValidationError("Un subservicio no puede tener hijos")
