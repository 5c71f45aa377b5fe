from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from app.domains.common.errors import DomainValidationError
from app.domains.common.ids import new_object_id
from app.domains.common.slug import is_slug

MAX_TITLE = 200


class PostStatus(str, Enum):
    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    SCHEDULED = "SCHEDULED"
    ARCHIVED = "ARCHIVED"

    @classmethod
    def parse(cls, value: Any) -> "PostStatus":
        try:
            return cls(str(value).upper())
        except ValueError:
            raise DomainValidationError(f"Estado de publicación desconocido: {value}")


@dataclass
class FormatConfig:
    """Formato de lectura del artículo"""

    line_height: float = 1.4
    paragraph_spacing: float = 0.5

    def __post_init__(self):
        if not 0 < self.line_height <= 5:
            raise DomainValidationError("El interlineado debe estar entre 0 y 5")
        if not 0 <= self.paragraph_spacing <= 10:
            raise DomainValidationError("El espaciado entre párrafos debe estar entre 0 y 10")

    def to_dict(self) -> Dict[str, float]:
        return {"lineHeight": self.line_height, "paragraphSpacing": self.paragraph_spacing}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FormatConfig":
        if not data:
            return cls()
        return cls(
            line_height=float(data.get("lineHeight", data.get("line_height", 1.4))),
            paragraph_spacing=float(data.get("paragraphSpacing", data.get("paragraph_spacing", 0.5))),
        )


class BlogPost:
    """Artículo del blog. Las transiciones de estado son métodos explícitos"""

    def __init__(
        self,
        title: str,
        slug: str,
        content: str,
        author_id: str,
        category_id: str,
        excerpt: str = "",
        tags: Optional[List[str]] = None,
        status: PostStatus = PostStatus.DRAFT,
        published_at: Optional[datetime] = None,
        featured_image: Optional[str] = None,
        seo_title: Optional[str] = None,
        seo_description: Optional[str] = None,
        view_count: int = 0,
        format_config: Optional[FormatConfig] = None,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not title or not title.strip():
            raise DomainValidationError("El título es requerido")
        if len(title) > MAX_TITLE:
            raise DomainValidationError(f"El título no puede exceder {MAX_TITLE} caracteres")
        if not is_slug(slug):
            raise DomainValidationError(f"Slug inválido: '{slug}'")
        if not author_id:
            raise DomainValidationError("El autor es requerido")
        if not category_id:
            raise DomainValidationError("La categoría es requerida")
        if view_count is None or view_count < 0:
            raise DomainValidationError("El contador de visitas no puede ser negativo")

        self.id = id or new_object_id()
        self.title = title.strip()
        self.slug = slug
        self.excerpt = excerpt or ""
        self.content = content or ""
        self.featured_image = featured_image or None
        self.author_id = author_id
        self.category_id = category_id
        self.tags = list(tags or [])
        self.status = PostStatus.parse(status) if not isinstance(status, PostStatus) else status
        self.published_at = published_at
        self._seo_title = seo_title or None
        self._seo_description = seo_description or None
        self.view_count = view_count
        self.format_config = format_config or FormatConfig()
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    @property
    def seo_title(self) -> str:
        return self._seo_title or self.title

    @property
    def seo_description(self) -> str:
        return self._seo_description or self.excerpt

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED

    def _touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def update_content(self, title: str, content: str, excerpt: str) -> None:
        if not title or not title.strip():
            raise DomainValidationError("El título es requerido")
        if len(title) > MAX_TITLE:
            raise DomainValidationError(f"El título no puede exceder {MAX_TITLE} caracteres")
        self.title = title.strip()
        self.content = content or ""
        self.excerpt = excerpt or ""
        self._touch()

    def update_slug(self, slug: str) -> None:
        if not is_slug(slug):
            raise DomainValidationError(f"Slug inválido: '{slug}'")
        self.slug = slug
        self._touch()

    def update_featured_image(self, image_url: Optional[str]) -> None:
        self.featured_image = image_url or None
        self._touch()

    def update_category(self, category_id: str) -> None:
        if not category_id:
            raise DomainValidationError("La categoría es requerida")
        self.category_id = category_id
        self._touch()

    def update_tags(self, tags: List[str]) -> None:
        self.tags = list(tags)
        self._touch()

    def update_seo(self, seo_title: Optional[str], seo_description: Optional[str]) -> None:
        self._seo_title = seo_title or None
        self._seo_description = seo_description or None
        self._touch()

    def update_format(self, format_config: FormatConfig) -> None:
        self.format_config = format_config
        self._touch()

    def publish(self) -> None:
        self.status = PostStatus.PUBLISHED
        self.published_at = datetime.utcnow()
        self._touch()

    def unpublish(self) -> None:
        self.status = PostStatus.DRAFT
        self.published_at = None
        self._touch()

    def schedule(self, publish_date: datetime) -> None:
        if publish_date is None:
            raise DomainValidationError("La fecha de publicación es requerida")
        self.status = PostStatus.SCHEDULED
        self.published_at = publish_date
        self._touch()

    def archive(self) -> None:
        self.status = PostStatus.ARCHIVED
        self._touch()

    def increment_view_count(self) -> None:
        self.view_count += 1
        self._touch()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BlogPost):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"BlogPost(id={self.id}, slug={self.slug}, status={self.status.value})"


class Category:
    """Categoría del blog; parent_id forma un árbol"""

    def __init__(
        self,
        name: str,
        slug: str,
        description: Optional[str] = None,
        parent_id: Optional[str] = None,
        order: int = 0,
        is_active: bool = True,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not name or not name.strip():
            raise DomainValidationError("El nombre de la categoría es requerido")
        if not is_slug(slug):
            raise DomainValidationError(f"Slug inválido: '{slug}'")

        self.id = id or new_object_id()
        self.name = name.strip()
        self.slug = slug
        self.description = description
        self.parent_id = parent_id or None
        self.order = order
        self.is_active = is_active
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    @property
    def is_subcategory(self) -> bool:
        return self.parent_id is not None

    def _touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def update_name(self, name: str) -> None:
        if not name or not name.strip():
            raise DomainValidationError("El nombre de la categoría es requerido")
        self.name = name.strip()
        self._touch()

    def update_slug(self, slug: str) -> None:
        if not is_slug(slug):
            raise DomainValidationError(f"Slug inválido: '{slug}'")
        self.slug = slug
        self._touch()

    def update_description(self, description: Optional[str]) -> None:
        self.description = description
        self._touch()

    def update_parent(self, parent_id: Optional[str]) -> None:
        if parent_id and parent_id == self.id:
            raise DomainValidationError("Una categoría no puede ser su propia padre")
        self.parent_id = parent_id or None
        self._touch()

    def update_order(self, order: int) -> None:
        self.order = order
        self._touch()

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def __repr__(self) -> str:
        return f"Category(id={self.id}, slug={self.slug})"
