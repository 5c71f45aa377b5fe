import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.attorney_repository import AttorneyFilters, AttorneyRepository
from app.db.repositories.base import RepositoryError
from app.domains.attorneys.entities import Attorney
from app.domains.attorneys.schemas import (
    AttorneyCreate,
    AttorneySlugLink,
    AttorneyUpdate,
    SlugMigrationItem,
    SlugMigrationReport,
    SlugStatusReport,
)
from app.domains.common.errors import DomainValidationError
from app.domains.common.ids import new_object_id
from app.domains.common.pagination import Page, PaginationOptions
from app.domains.common.slug import generate_slug, is_slug, unique_slug

logger = logging.getLogger(__name__)

PROFILE_URL = "/equipo/{slug}"


class AttorneyNotFoundError(LookupError):
    def __init__(self, attorney_id: str):
        super().__init__(f"Abogado {attorney_id} no encontrado")
        self.attorney_id = attorney_id


class EmailAlreadyExistsError(DomainValidationError):
    def __init__(self, correo: str):
        super().__init__(f"Ya existe un abogado con el correo {correo}")
        self.correo = correo


class AttorneyService:
    """Casos de uso del directorio de abogados"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.attorney_repository = AttorneyRepository(session)

    async def create_attorney(self, data: AttorneyCreate) -> Attorney:
        """Alta de abogado con slug único derivado del nombre"""
        if await self.attorney_repository.find_by_email(data.correo):
            raise EmailAlreadyExistsError(data.correo)

        draft = Attorney.create(**data.model_dump())
        attorney_id = new_object_id()
        slug = await self._available_slug(generate_slug(draft.nombre), attorney_id)

        attorney = Attorney(**dict(draft.to_dict(), id=attorney_id, slug=slug))
        saved = await self.attorney_repository.save(attorney)
        logger.info("Abogado creado: %s (%s)", saved.nombre, saved.slug)
        return saved

    async def get_attorney(self, id_or_slug: str) -> Attorney:
        """Busca por ID y, si no existe, por slug"""
        attorney = await self.attorney_repository.find_by_id(id_or_slug)
        if attorney is None:
            attorney = await self.attorney_repository.find_by_slug(id_or_slug)
        if attorney is None:
            raise AttorneyNotFoundError(id_or_slug)
        return attorney

    async def update_attorney(self, id_or_slug: str, data: AttorneyUpdate) -> Attorney:
        attorney = await self.get_attorney(id_or_slug)
        changes = data.model_dump(exclude_unset=True)

        correo = changes.get("correo")
        if correo and correo.strip().lower() != attorney.correo:
            existing = await self.attorney_repository.find_by_email(correo)
            if existing and existing.id != attorney.id:
                raise EmailAlreadyExistsError(correo)

        slug = changes.get("slug")
        if slug and slug != attorney.slug:
            if not is_slug(slug):
                raise DomainValidationError(f"Slug inválido: '{slug}'")
            if await self.attorney_repository.slug_exists(slug, exclude_id=attorney.id):
                raise DomainValidationError(f"El slug '{slug}' ya está en uso")

        updated = await self.attorney_repository.update(attorney.update(**changes))
        if updated is None:
            raise AttorneyNotFoundError(attorney.id)
        logger.info("Abogado actualizado: %s", updated.id)
        return updated

    async def delete_attorney(self, id_or_slug: str) -> None:
        attorney = await self.get_attorney(id_or_slug)
        if not await self.attorney_repository.delete(attorney.id):
            raise AttorneyNotFoundError(attorney.id)
        logger.info("Abogado eliminado: %s", attorney.id)

    async def list_attorneys(
        self,
        filters: Optional[AttorneyFilters] = None,
        options: Optional[PaginationOptions] = None,
    ) -> Page:
        return await self.attorney_repository.find_all(filters, options)

    async def get_active_attorneys(self) -> List[Attorney]:
        return await self.attorney_repository.find_active()

    async def get_partners(self) -> List[Attorney]:
        return await self.attorney_repository.find_partners()

    async def get_by_specialization(self, especializacion: str) -> List[Attorney]:
        return await self.attorney_repository.find_by_specialization(especializacion)

    async def search_attorneys(self, query: str) -> List[Attorney]:
        if not query or not query.strip():
            raise DomainValidationError("Se requiere un término de búsqueda")
        return await self.attorney_repository.search(query)

    async def migrate_slugs(self) -> SlugMigrationReport:
        """Asigna slug a todos los abogados que no lo tienen"""
        pending = await self.attorney_repository.find_without_slug()
        logger.info("Migración de slugs: %d abogados sin slug", len(pending))

        updated = 0
        failed = 0
        results: List[SlugMigrationItem] = []

        for attorney in pending:
            try:
                slug = await self._available_slug(generate_slug(attorney.nombre), attorney.id)
                await self.attorney_repository.update(attorney.with_slug(slug))
            except (DomainValidationError, RepositoryError) as e:
                failed += 1
                logger.warning("No se pudo asignar slug a %s: %s", attorney.nombre, e)
                results.append(
                    SlugMigrationItem(id=attorney.id, nombre=attorney.nombre, status="failed", error=str(e))
                )
                continue

            updated += 1
            results.append(SlugMigrationItem(id=attorney.id, nombre=attorney.nombre, slug=slug, status="success"))

        return SlugMigrationReport(
            total=len(pending),
            updated=updated,
            failed=failed,
            results=results,
            all_attorneys=await self._slug_links(),
        )

    async def slug_status(self) -> SlugStatusReport:
        total = await self.attorney_repository.count()
        with_slug = await self.attorney_repository.count_with_slug()
        return SlugStatusReport(
            total_attorneys=total,
            attorneys_with_slug=with_slug,
            attorneys_without_slug=total - with_slug,
            needs_migration=total > with_slug,
            attorneys=await self._slug_links(),
        )

    async def _available_slug(self, slug: str, attorney_id: str) -> str:
        if await self.attorney_repository.slug_exists(slug, exclude_id=attorney_id):
            return unique_slug(slug, attorney_id)
        return slug

    async def _slug_links(self) -> List[AttorneySlugLink]:
        return [
            AttorneySlugLink(nombre=nombre, slug=slug, url=PROFILE_URL.format(slug=slug) if slug else None)
            for nombre, slug in await self.attorney_repository.list_slugs()
        ]
