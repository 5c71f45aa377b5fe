from dataclasses import dataclass
from typing import List, Optional, Tuple

from sqlalchemy import delete, func, or_, select, update

from app.db.models.attorney import Attorney as AttorneyModel
from app.db.repositories.base import BaseRepository, paginate_list, repository_operation
from app.domains.attorneys.entities import Attorney
from app.domains.common.pagination import Page, PaginationOptions

DEFAULT_ORDER = (AttorneyModel.es_socio.desc(), AttorneyModel.nombre.asc())


@dataclass
class AttorneyFilters:
    activo: Optional[bool] = None
    es_socio: Optional[bool] = None
    especializacion: Optional[str] = None
    nombre: Optional[str] = None


class AttorneyRepository(BaseRepository):
    """Repositorio de abogados"""

    sort_columns = {
        "nombre": AttorneyModel.nombre,
        "cargo": AttorneyModel.cargo,
        "experienciaAnios": AttorneyModel.experiencia_anios,
        "experiencia_anios": AttorneyModel.experiencia_anios,
        "esSocio": AttorneyModel.es_socio,
        "es_socio": AttorneyModel.es_socio,
        "fechaCreacion": AttorneyModel.created_at,
        "fecha_creacion": AttorneyModel.created_at,
    }

    @repository_operation
    async def find_by_id(self, attorney_id: str) -> Optional[Attorney]:
        result = await self.session.execute(select(AttorneyModel).where(AttorneyModel.id == attorney_id))
        db_attorney = result.scalar_one_or_none()
        return self._to_domain(db_attorney) if db_attorney else None

    @repository_operation
    async def find_by_slug(self, slug: str) -> Optional[Attorney]:
        result = await self.session.execute(select(AttorneyModel).where(AttorneyModel.slug == slug))
        db_attorney = result.scalar_one_or_none()
        return self._to_domain(db_attorney) if db_attorney else None

    @repository_operation
    async def find_by_email(self, correo: str) -> Optional[Attorney]:
        result = await self.session.execute(
            select(AttorneyModel).where(AttorneyModel.correo == correo.strip().lower())
        )
        db_attorney = result.scalar_one_or_none()
        return self._to_domain(db_attorney) if db_attorney else None

    @repository_operation
    async def find_all(
        self,
        filters: Optional[AttorneyFilters] = None,
        options: Optional[PaginationOptions] = None,
    ) -> Page:
        """Listado filtrado; por defecto socios primero y luego por nombre"""
        filters = filters or AttorneyFilters()
        options = options or PaginationOptions()

        query = select(AttorneyModel)
        if filters.activo is not None:
            query = query.where(AttorneyModel.activo == filters.activo)
        if filters.es_socio is not None:
            query = query.where(AttorneyModel.es_socio == filters.es_socio)
        if filters.nombre:
            query = query.where(AttorneyModel.nombre.ilike(f"%{filters.nombre}%"))

        if not filters.especializacion:
            return await self._paginate(query, options, DEFAULT_ORDER, self._to_domain)

        # especializaciones es JSON: el filtro de pertenencia se hace en memoria
        result = await self.session.execute(query.order_by(*self._order_by(options, DEFAULT_ORDER)))
        attorneys = [
            self._to_domain(row)
            for row in result.scalars().all()
            if filters.especializacion in (row.especializaciones or [])
        ]
        return paginate_list(attorneys, options)

    @repository_operation
    async def find_active(self) -> List[Attorney]:
        result = await self.session.execute(
            select(AttorneyModel).where(AttorneyModel.activo.is_(True)).order_by(*DEFAULT_ORDER)
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def find_partners(self) -> List[Attorney]:
        result = await self.session.execute(
            select(AttorneyModel)
            .where(AttorneyModel.activo.is_(True), AttorneyModel.es_socio.is_(True))
            .order_by(AttorneyModel.nombre.asc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def find_by_specialization(self, especializacion: str) -> List[Attorney]:
        result = await self.session.execute(
            select(AttorneyModel)
            .where(AttorneyModel.activo.is_(True))
            .order_by(AttorneyModel.es_socio.desc(), AttorneyModel.experiencia_anios.desc())
        )
        return [
            self._to_domain(row)
            for row in result.scalars().all()
            if especializacion in (row.especializaciones or [])
        ]

    @repository_operation
    async def search(self, query: str) -> List[Attorney]:
        """Búsqueda de texto libre entre los abogados activos"""
        needle = query.strip().lower()
        if not needle:
            return []

        result = await self.session.execute(
            select(AttorneyModel).where(AttorneyModel.activo.is_(True)).order_by(*DEFAULT_ORDER)
        )
        attorneys = []
        for row in result.scalars().all():
            texts = [row.nombre, row.cargo, row.descripcion_corta, row.biografia] + list(row.especializaciones or [])
            if any(needle in (text or "").lower() for text in texts):
                attorneys.append(self._to_domain(row))
        return attorneys

    @repository_operation
    async def slug_exists(self, slug: str, exclude_id: Optional[str] = None) -> bool:
        query = select(AttorneyModel.id).where(AttorneyModel.slug == slug)
        if exclude_id:
            query = query.where(AttorneyModel.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    @repository_operation
    async def find_without_slug(self) -> List[Attorney]:
        result = await self.session.execute(
            select(AttorneyModel)
            .where(or_(AttorneyModel.slug.is_(None), AttorneyModel.slug == ""))
            .order_by(AttorneyModel.created_at.asc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def count_with_slug(self) -> int:
        result = await self.session.execute(
            select(func.count(AttorneyModel.id)).where(AttorneyModel.slug.is_not(None), AttorneyModel.slug != "")
        )
        return result.scalar() or 0

    @repository_operation
    async def count(self) -> int:
        result = await self.session.execute(select(func.count(AttorneyModel.id)))
        return result.scalar() or 0

    @repository_operation
    async def list_slugs(self) -> List[Tuple[str, Optional[str]]]:
        """Pares (nombre, slug) de todos los abogados, por nombre"""
        result = await self.session.execute(
            select(AttorneyModel.nombre, AttorneyModel.slug).order_by(AttorneyModel.nombre.asc())
        )
        return [(nombre, slug) for nombre, slug in result.all()]

    @repository_operation
    async def save(self, attorney: Attorney) -> Attorney:
        db_attorney = AttorneyModel(**self._to_persistence(attorney))
        self.session.add(db_attorney)
        await self.session.commit()
        await self.session.refresh(db_attorney)
        return self._to_domain(db_attorney)

    @repository_operation
    async def update(self, attorney: Attorney) -> Optional[Attorney]:
        values = self._to_persistence(attorney)
        values.pop("id", None)
        values.pop("created_at")
        await self.session.execute(
            update(AttorneyModel).where(AttorneyModel.id == attorney.id).values(**values)
        )
        await self.session.commit()
        return await self.find_by_id(attorney.id)

    @repository_operation
    async def delete(self, attorney_id: str) -> bool:
        result = await self.session.execute(delete(AttorneyModel).where(AttorneyModel.id == attorney_id))
        await self.session.commit()
        return result.rowcount > 0

    def _to_persistence(self, attorney: Attorney) -> dict:
        values = {
            "nombre": attorney.nombre,
            "slug": attorney.slug,
            "cargo": attorney.cargo,
            "especializaciones": list(attorney.especializaciones),
            "servicios_que_atiende": list(attorney.servicios_que_atiende),
            "experiencia_anios": attorney.experiencia_anios,
            "educacion": list(attorney.educacion),
            "idiomas": list(attorney.idiomas),
            "correo": attorney.correo,
            "telefono": attorney.telefono,
            "biografia": attorney.biografia,
            "logros": list(attorney.logros),
            "casos_destacados": list(attorney.casos_destacados),
            "imagen_url": attorney.imagen_url,
            "linked_in": attorney.linked_in,
            "es_socio": attorney.es_socio,
            "descripcion_corta": attorney.descripcion_corta,
            "activo": attorney.activo,
            "created_at": attorney.fecha_creacion,
            "updated_at": attorney.fecha_actualizacion,
        }
        if attorney.id:
            values["id"] = attorney.id
        return values

    def _to_domain(self, db_attorney: AttorneyModel) -> Attorney:
        return Attorney(
            id=db_attorney.id,
            slug=db_attorney.slug,
            nombre=db_attorney.nombre,
            cargo=db_attorney.cargo,
            especializaciones=db_attorney.especializaciones or [],
            servicios_que_atiende=db_attorney.servicios_que_atiende or [],
            experiencia_anios=db_attorney.experiencia_anios,
            educacion=db_attorney.educacion or [],
            idiomas=db_attorney.idiomas or [],
            correo=db_attorney.correo,
            telefono=db_attorney.telefono,
            biografia=db_attorney.biografia,
            logros=db_attorney.logros or [],
            casos_destacados=db_attorney.casos_destacados or [],
            imagen_url=db_attorney.imagen_url,
            linked_in=db_attorney.linked_in,
            es_socio=db_attorney.es_socio,
            descripcion_corta=db_attorney.descripcion_corta,
            activo=db_attorney.activo,
            fecha_creacion=db_attorney.created_at,
            fecha_actualizacion=db_attorney.updated_at,
        )
