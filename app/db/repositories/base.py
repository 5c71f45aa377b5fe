import functools
import logging
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.common.pagination import Page, PaginationOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RepositoryError(Exception):
    """La base de datos falló durante una operación de repositorio"""

    def __init__(self, operation: str):
        super().__init__(f"Error de base de datos en {operation}")
        self.operation = operation


def repository_operation(fn: Callable) -> Callable:
    """Registra el fallo del driver y lo relanza como RepositoryError"""

    @functools.wraps(fn)
    async def wrapper(self, *args, **kwargs):
        try:
            return await fn(self, *args, **kwargs)
        except SQLAlchemyError as e:
            operation = f"{type(self).__name__}.{fn.__name__}"
            logger.error("Error en %s: %s", operation, e)
            await self.session.rollback()
            raise RepositoryError(operation) from e

    return wrapper


class BaseRepository:
    """Sesión compartida y utilidades de paginación"""

    # nombre público del campo -> columna ordenable
    sort_columns: Dict[str, object] = {}

    def __init__(self, session: AsyncSession):
        self.session = session

    def _order_by(self, options: Optional[PaginationOptions], default: Sequence) -> List:
        if options and options.sort_by and options.sort_by in self.sort_columns:
            column = self.sort_columns[options.sort_by]
            return [column.desc() if options.sort_order == "desc" else column.asc()]
        return list(default)

    async def _paginate(self, query, options: PaginationOptions, default_order: Sequence, to_domain: Callable) -> Page:
        total = await self.session.scalar(select(func.count()).select_from(query.order_by(None).subquery()))
        result = await self.session.execute(
            query.order_by(*self._order_by(options, default_order)).offset(options.offset).limit(options.limit)
        )
        return Page(
            data=[to_domain(row) for row in result.scalars().all()],
            total=total or 0,
            page=options.page,
            limit=options.limit,
        )


def paginate_list(items: List[T], options: PaginationOptions) -> Page:
    """Paginación en memoria para filtros sobre columnas JSON"""
    return Page(
        data=items[options.offset:options.offset + options.limit],
        total=len(items),
        page=options.page,
        limit=options.limit,
    )
