import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repositories.blog_repository import BlogPostFilter, BlogPostRepository, CategoryRepository
from app.domains.blog.entities import BlogPost, Category, FormatConfig, PostStatus
from app.domains.blog.schemas import CategoryCreate, CategoryUpdate, PostCreate, PostUpdate
from app.domains.common.errors import DomainValidationError
from app.domains.common.pagination import Page, PaginationOptions
from app.domains.common.slug import generate_slug, is_slug, unique_slug

logger = logging.getLogger(__name__)


class PostNotFoundError(LookupError):
    def __init__(self, post_id: str):
        super().__init__(f"Artículo {post_id} no encontrado")
        self.post_id = post_id


class CategoryNotFoundError(LookupError):
    def __init__(self, category_id: str):
        super().__init__(f"Categoría {category_id} no encontrada")
        self.category_id = category_id


class BlogService:
    """Casos de uso del blog: lectura pública y edición desde el panel"""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.post_repository = BlogPostRepository(session)
        self.category_repository = CategoryRepository(session)

    # Lectura pública

    async def list_published(self, options: Optional[PaginationOptions] = None) -> Page:
        options = options or PaginationOptions()
        if not options.sort_by:
            options.sort_by, options.sort_order = "publishedAt", "desc"
        return await self.post_repository.find_published(options)

    async def get_published_by_slug(self, slug: str) -> BlogPost:
        post = await self.post_repository.find_by_slug(slug)
        # Los borradores no existen para el público
        if post is None or not post.is_published:
            raise PostNotFoundError(slug)
        return post

    async def register_view(self, post_id: str) -> None:
        if not await self.post_repository.increment_view_count(post_id):
            raise PostNotFoundError(post_id)

    async def get_related(self, post_id: str) -> List[BlogPost]:
        post = await self.get_post(post_id)
        return await self.post_repository.find_related(post)

    # Panel

    async def list_posts(
        self,
        post_filter: Optional[BlogPostFilter] = None,
        options: Optional[PaginationOptions] = None,
    ) -> Page:
        return await self.post_repository.find_all(post_filter, options)

    async def get_post(self, post_id: str) -> BlogPost:
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post

    async def create_post(self, data: PostCreate, author_id: str) -> BlogPost:
        await self._ensure_category(data.category_id)

        post = BlogPost(
            title=data.title,
            slug=data.slug or generate_slug(data.title),
            content=data.content,
            excerpt=data.excerpt,
            author_id=author_id,
            category_id=data.category_id,
            tags=data.tags,
            featured_image=data.featured_image,
            seo_title=data.seo_title,
            seo_description=data.seo_description,
            format_config=self._format_config(data),
        )
        if await self.post_repository.slug_exists(post.slug):
            post.update_slug(unique_slug(post.slug, post.id))

        self._apply_status(post, data.status, data.published_at)

        saved = await self.post_repository.save(post)
        logger.info("Artículo creado: %s (%s) por %s", saved.slug, saved.status.value, author_id)
        return saved

    async def update_post(self, post: BlogPost, data: PostUpdate) -> BlogPost:
        """Reemplaza el contenido editable; el autor y las visitas se conservan"""
        await self._ensure_category(data.category_id)

        post.update_content(data.title, data.content, data.excerpt)
        if data.slug and data.slug != post.slug:
            if not is_slug(data.slug):
                raise DomainValidationError(f"Slug inválido: '{data.slug}'")
            if await self.post_repository.slug_exists(data.slug, exclude_id=post.id):
                raise DomainValidationError(f"El slug '{data.slug}' ya está en uso")
            post.update_slug(data.slug)
        post.update_category(data.category_id)
        post.update_tags(data.tags)
        post.update_featured_image(data.featured_image)
        post.update_seo(data.seo_title, data.seo_description)
        if data.format_config is not None:
            post.update_format(self._format_config(data))
        if data.status is not None:
            self._apply_status(post, data.status, data.published_at)

        return await self._persist(post)

    async def delete_post(self, post_id: str) -> None:
        if not await self.post_repository.delete(post_id):
            raise PostNotFoundError(post_id)
        logger.info("Artículo eliminado: %s", post_id)

    async def publish_post(self, post_id: str) -> BlogPost:
        post = await self.get_post(post_id)
        post.publish()
        return await self._persist(post)

    async def unpublish_post(self, post_id: str) -> BlogPost:
        post = await self.get_post(post_id)
        post.unpublish()
        return await self._persist(post)

    async def archive_post(self, post_id: str) -> BlogPost:
        post = await self.get_post(post_id)
        post.archive()
        return await self._persist(post)

    async def schedule_post(self, post_id: str, publish_date: datetime) -> BlogPost:
        post = await self.get_post(post_id)
        post.schedule(publish_date)
        return await self._persist(post)

    # Categorías

    async def list_categories(self, active_only: bool = True) -> List[Category]:
        if active_only:
            return await self.category_repository.find_active()
        return await self.category_repository.find_all()

    async def get_category(self, id_or_slug: str) -> Category:
        category = await self.category_repository.find_by_id(id_or_slug)
        if category is None:
            category = await self.category_repository.find_by_slug(id_or_slug)
        if category is None:
            raise CategoryNotFoundError(id_or_slug)
        return category

    async def create_category(self, data: CategoryCreate) -> Category:
        if data.parent_id:
            await self.get_category(data.parent_id)
        slug = data.slug or generate_slug(data.name)
        if await self.category_repository.find_by_slug(slug):
            raise DomainValidationError(f"El slug '{slug}' ya está en uso")

        category = Category(
            name=data.name,
            slug=slug,
            description=data.description,
            parent_id=data.parent_id,
            order=data.order,
            is_active=data.is_active,
        )
        return await self.category_repository.save(category)

    async def update_category(self, category_id: str, data: CategoryUpdate) -> Category:
        category = await self.get_category(category_id)
        changes = data.model_dump(exclude_unset=True)

        if "name" in changes:
            category.update_name(changes["name"])
        if changes.get("slug") and changes["slug"] != category.slug:
            existing = await self.category_repository.find_by_slug(changes["slug"])
            if existing and existing.id != category.id:
                raise DomainValidationError(f"El slug '{changes['slug']}' ya está en uso")
            category.update_slug(changes["slug"])
        if "description" in changes:
            category.update_description(changes["description"])
        if "parent_id" in changes:
            if changes["parent_id"]:
                await self.get_category(changes["parent_id"])
            category.update_parent(changes["parent_id"])
        if changes.get("order") is not None:
            category.update_order(changes["order"])
        if changes.get("is_active") is True:
            category.activate()
        elif changes.get("is_active") is False:
            category.deactivate()

        updated = await self.category_repository.update(category)
        if updated is None:
            raise CategoryNotFoundError(category_id)
        return updated

    async def delete_category(self, category_id: str) -> None:
        category = await self.get_category(category_id)
        if await self.category_repository.find_children(category.id):
            raise DomainValidationError("No se puede eliminar una categoría con subcategorías")
        if not await self.category_repository.delete(category.id):
            raise CategoryNotFoundError(category_id)

    async def _ensure_category(self, category_id: str) -> None:
        if await self.category_repository.find_by_id(category_id) is None:
            raise DomainValidationError(f"La categoría {category_id} no existe")

    async def _persist(self, post: BlogPost) -> BlogPost:
        updated = await self.post_repository.update(post)
        if updated is None:
            raise PostNotFoundError(post.id)
        logger.info("Artículo actualizado: %s (%s)", updated.id, updated.status.value)
        return updated

    @staticmethod
    def _format_config(data) -> FormatConfig:
        if data.format_config is None:
            return FormatConfig()
        return FormatConfig(
            line_height=data.format_config.line_height,
            paragraph_spacing=data.format_config.paragraph_spacing,
        )

    @staticmethod
    def _apply_status(post: BlogPost, status: PostStatus, published_at: Optional[datetime]) -> None:
        if status == PostStatus.PUBLISHED:
            # Solo se fija la fecha al pasar a publicado
            if not post.is_published or post.published_at is None:
                post.publish()
        elif status == PostStatus.SCHEDULED:
            post.schedule(published_at)
        elif status == PostStatus.ARCHIVED:
            post.archive()
        elif post.status != PostStatus.DRAFT:
            post.unpublish()
