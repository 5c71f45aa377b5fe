from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domains.common.pagination import Page

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base de los esquemas públicos: JSON en camelCase, atributos en snake_case"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ApiResponse(BaseModel, Generic[T]):
    """Sobre común de todas las respuestas"""

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None


class PaginationInfo(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_page(cls, page: Page) -> "PaginationInfo":
        return cls(
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            has_next=page.has_next,
            has_prev=page.has_prev,
        )
