import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class PaginationOptions:
    page: int = 1
    limit: int = 10
    sort_by: Optional[str] = None
    sort_order: str = "asc"

    def __post_init__(self):
        self.page = max(int(self.page or 1), 1)
        self.limit = max(int(self.limit or 10), 1)
        if self.sort_order not in ("asc", "desc"):
            self.sort_order = "asc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    data: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    def map(self, fn) -> "Page":
        return Page(data=[fn(item) for item in self.data], total=self.total, page=self.page, limit=self.limit)
