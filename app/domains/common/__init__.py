from app.domains.common.errors import DomainValidationError
from app.domains.common.ids import new_object_id
from app.domains.common.pagination import Page, PaginationOptions
from app.domains.common.slug import generate_slug, is_slug

__all__ = [
    "DomainValidationError",
    "new_object_id",
    "Page",
    "PaginationOptions",
    "generate_slug",
    "is_slug",
]
