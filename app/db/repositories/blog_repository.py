from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import delete, or_, select, update

from app.db.models.blog import BlogCategory as CategoryModel
from app.db.models.blog import BlogPost as BlogPostModel
from app.db.repositories.base import BaseRepository, paginate_list, repository_operation
from app.domains.blog.entities import BlogPost, Category, FormatConfig, PostStatus
from app.domains.common.pagination import Page, PaginationOptions

DEFAULT_ORDER = (BlogPostModel.created_at.desc(),)
RELATED_LIMIT = 5


@dataclass
class BlogPostFilter:
    status: Optional[PostStatus] = None
    category_id: Optional[str] = None
    author_id: Optional[str] = None
    tags: Optional[List[str]] = None
    search: Optional[str] = None


class BlogPostRepository(BaseRepository):
    """Repositorio de artículos del blog"""

    sort_columns = {
        "createdAt": BlogPostModel.created_at,
        "created_at": BlogPostModel.created_at,
        "updatedAt": BlogPostModel.updated_at,
        "updated_at": BlogPostModel.updated_at,
        "publishedAt": BlogPostModel.published_at,
        "published_at": BlogPostModel.published_at,
        "title": BlogPostModel.title,
        "viewCount": BlogPostModel.view_count,
        "view_count": BlogPostModel.view_count,
    }

    @repository_operation
    async def find_by_id(self, post_id: str) -> Optional[BlogPost]:
        result = await self.session.execute(select(BlogPostModel).where(BlogPostModel.id == post_id))
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    @repository_operation
    async def find_by_slug(self, slug: str) -> Optional[BlogPost]:
        result = await self.session.execute(select(BlogPostModel).where(BlogPostModel.slug == slug))
        db_post = result.scalar_one_or_none()
        return self._to_domain(db_post) if db_post else None

    @repository_operation
    async def find_all(
        self,
        post_filter: Optional[BlogPostFilter] = None,
        options: Optional[PaginationOptions] = None,
    ) -> Page:
        """Listado filtrado; por defecto los más recientes primero"""
        post_filter = post_filter or BlogPostFilter()
        options = options or PaginationOptions()

        query = select(BlogPostModel)
        if post_filter.status:
            query = query.where(BlogPostModel.status == PostStatus(post_filter.status).value)
        if post_filter.category_id:
            query = query.where(BlogPostModel.category_id == post_filter.category_id)
        if post_filter.author_id:
            query = query.where(BlogPostModel.author_id == post_filter.author_id)
        if post_filter.search:
            pattern = f"%{post_filter.search}%"
            query = query.where(or_(BlogPostModel.title.ilike(pattern), BlogPostModel.excerpt.ilike(pattern)))

        if not post_filter.tags:
            return await self._paginate(query, options, DEFAULT_ORDER, self._to_domain)

        # tags es JSON: basta con compartir una etiqueta
        wanted = set(post_filter.tags)
        result = await self.session.execute(query.order_by(*self._order_by(options, DEFAULT_ORDER)))
        posts = [self._to_domain(row) for row in result.scalars().all() if wanted & set(row.tags or [])]
        return paginate_list(posts, options)

    async def find_published(self, options: Optional[PaginationOptions] = None) -> Page:
        return await self.find_all(BlogPostFilter(status=PostStatus.PUBLISHED), options)

    async def find_by_author(self, author_id: str, options: Optional[PaginationOptions] = None) -> Page:
        return await self.find_all(BlogPostFilter(author_id=author_id), options)

    async def find_by_category(self, category_id: str, options: Optional[PaginationOptions] = None) -> Page:
        return await self.find_all(
            BlogPostFilter(category_id=category_id, status=PostStatus.PUBLISHED), options
        )

    async def find_by_tag(self, tag: str, options: Optional[PaginationOptions] = None) -> Page:
        return await self.find_all(BlogPostFilter(tags=[tag], status=PostStatus.PUBLISHED), options)

    @repository_operation
    async def find_related(self, post: BlogPost, limit: int = RELATED_LIMIT) -> List[BlogPost]:
        """Publicados de la misma categoría o con alguna etiqueta en común"""
        result = await self.session.execute(
            select(BlogPostModel)
            .where(
                BlogPostModel.id != post.id,
                BlogPostModel.status == PostStatus.PUBLISHED.value,
            )
            .order_by(BlogPostModel.published_at.desc())
        )
        tags = set(post.tags)
        related = [
            self._to_domain(row)
            for row in result.scalars().all()
            if row.category_id == post.category_id or tags & set(row.tags or [])
        ]
        return related[:limit]

    @repository_operation
    async def slug_exists(self, slug: str, exclude_id: Optional[str] = None) -> bool:
        query = select(BlogPostModel.id).where(BlogPostModel.slug == slug)
        if exclude_id:
            query = query.where(BlogPostModel.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    @repository_operation
    async def save(self, post: BlogPost) -> BlogPost:
        db_post = BlogPostModel(**self._to_persistence(post))
        self.session.add(db_post)
        await self.session.commit()
        await self.session.refresh(db_post)
        return self._to_domain(db_post)

    @repository_operation
    async def update(self, post: BlogPost) -> Optional[BlogPost]:
        values = self._to_persistence(post)
        values.pop("id")
        values.pop("created_at")
        await self.session.execute(update(BlogPostModel).where(BlogPostModel.id == post.id).values(**values))
        await self.session.commit()
        return await self.find_by_id(post.id)

    @repository_operation
    async def delete(self, post_id: str) -> bool:
        result = await self.session.execute(delete(BlogPostModel).where(BlogPostModel.id == post_id))
        await self.session.commit()
        return result.rowcount > 0

    @repository_operation
    async def increment_view_count(self, post_id: str) -> bool:
        result = await self.session.execute(
            update(BlogPostModel)
            .where(BlogPostModel.id == post_id)
            .values(view_count=BlogPostModel.view_count + 1)
        )
        await self.session.commit()
        return result.rowcount > 0

    def _to_persistence(self, post: BlogPost) -> dict:
        return {
            "id": post.id,
            "title": post.title,
            "slug": post.slug,
            "excerpt": post.excerpt,
            "content": post.content,
            "featured_image": post.featured_image,
            "author_id": post.author_id,
            "category_id": post.category_id,
            "tags": list(post.tags),
            "status": post.status.value,
            "published_at": post.published_at,
            "seo_title": post._seo_title,
            "seo_description": post._seo_description,
            "view_count": post.view_count,
            "format_config": post.format_config.to_dict(),
            "created_at": post.created_at,
            "updated_at": post.updated_at,
        }

    def _to_domain(self, db_post: BlogPostModel) -> BlogPost:
        return BlogPost(
            id=db_post.id,
            title=db_post.title,
            slug=db_post.slug,
            excerpt=db_post.excerpt,
            content=db_post.content,
            featured_image=db_post.featured_image,
            author_id=db_post.author_id,
            category_id=db_post.category_id,
            tags=db_post.tags or [],
            status=PostStatus(db_post.status),
            published_at=db_post.published_at,
            seo_title=db_post.seo_title,
            seo_description=db_post.seo_description,
            view_count=db_post.view_count,
            format_config=FormatConfig.from_dict(db_post.format_config),
            created_at=db_post.created_at,
            updated_at=db_post.updated_at,
        )


class CategoryRepository(BaseRepository):
    """Repositorio de categorías del blog"""

    @repository_operation
    async def find_by_id(self, category_id: str) -> Optional[Category]:
        result = await self.session.execute(select(CategoryModel).where(CategoryModel.id == category_id))
        db_category = result.scalar_one_or_none()
        return self._to_domain(db_category) if db_category else None

    @repository_operation
    async def find_by_slug(self, slug: str) -> Optional[Category]:
        result = await self.session.execute(select(CategoryModel).where(CategoryModel.slug == slug))
        db_category = result.scalar_one_or_none()
        return self._to_domain(db_category) if db_category else None

    @repository_operation
    async def find_all(self) -> List[Category]:
        result = await self.session.execute(
            select(CategoryModel).order_by(CategoryModel.order.asc(), CategoryModel.name.asc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def find_active(self) -> List[Category]:
        result = await self.session.execute(
            select(CategoryModel)
            .where(CategoryModel.is_active.is_(True))
            .order_by(CategoryModel.order.asc(), CategoryModel.name.asc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def find_children(self, parent_id: str) -> List[Category]:
        result = await self.session.execute(
            select(CategoryModel).where(CategoryModel.parent_id == parent_id).order_by(CategoryModel.order.asc())
        )
        return [self._to_domain(row) for row in result.scalars().all()]

    @repository_operation
    async def save(self, category: Category) -> Category:
        db_category = CategoryModel(**self._to_persistence(category))
        self.session.add(db_category)
        await self.session.commit()
        await self.session.refresh(db_category)
        return self._to_domain(db_category)

    @repository_operation
    async def update(self, category: Category) -> Optional[Category]:
        values = self._to_persistence(category)
        values.pop("id")
        values.pop("created_at")
        await self.session.execute(update(CategoryModel).where(CategoryModel.id == category.id).values(**values))
        await self.session.commit()
        return await self.find_by_id(category.id)

    @repository_operation
    async def delete(self, category_id: str) -> bool:
        result = await self.session.execute(delete(CategoryModel).where(CategoryModel.id == category_id))
        await self.session.commit()
        return result.rowcount > 0

    def _to_persistence(self, category: Category) -> dict:
        return {
            "id": category.id,
            "name": category.name,
            "slug": category.slug,
            "description": category.description,
            "parent_id": category.parent_id,
            "order": category.order,
            "is_active": category.is_active,
            "created_at": category.created_at,
            "updated_at": category.updated_at,
        }

    def _to_domain(self, db_category: CategoryModel) -> Category:
        return Category(
            id=db_category.id,
            name=db_category.name,
            slug=db_category.slug,
            description=db_category.description,
            parent_id=db_category.parent_id,
            order=db_category.order,
            is_active=db_category.is_active,
            created_at=db_category.created_at,
            updated_at=db_category.updated_at,
        )
