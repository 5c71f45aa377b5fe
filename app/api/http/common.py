from typing import Literal, Optional

from fastapi import Query

from app.domains.common.pagination import PaginationOptions


def pagination_params(default_limit: int = 10, max_limit: int = 100):
    """Dependencia con los parámetros de paginación de los listados"""

    def _pagination(
        page: int = Query(1, ge=1),
        limit: int = Query(default_limit, ge=1, le=max_limit),
        sort_by: Optional[str] = Query(None, alias="sortBy"),
        sort_order: Literal["asc", "desc"] = Query("asc", alias="sortOrder"),
    ) -> PaginationOptions:
        return PaginationOptions(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)

    return _pagination
