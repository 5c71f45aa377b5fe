from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.errors import error_response
from app.api.http.common import pagination_params
from app.core.auth import AuthResult, require_permission, verify_content_edit_auth
from app.core.db import get_db
from app.core.roles import has_permission
from app.db.repositories.blog_repository import BlogPostFilter
from app.domains.blog.entities import PostStatus
from app.domains.blog.schemas import (
    AdminPostPage,
    CategoryCreate,
    CategoryResponse,
    CategoryUpdate,
    PostCreate,
    PostResponse,
    PostSchedule,
    PostUpdate,
)
from app.domains.blog.services import BlogService, CategoryNotFoundError, PostNotFoundError
from app.domains.common.pagination import PaginationOptions
from app.domains.common.schemas import ApiResponse, PaginationInfo

router = APIRouter(prefix="/api/admin/blog", tags=["admin-blog"])


async def _load_post(service: BlogService, post_id: str):
    try:
        return await service.get_post(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")


@router.get("/posts", response_model=ApiResponse[AdminPostPage])
async def list_posts(
    status_filter: Optional[str] = Query(None, alias="status"),
    category_id: Optional[str] = Query(None, alias="categoryId"),
    author_id: Optional[str] = Query(None, alias="authorId"),
    search: Optional[str] = Query(None),
    options: PaginationOptions = Depends(pagination_params(default_limit=50)),
    auth: AuthResult = Depends(require_permission("manage_blog")),
    db: AsyncSession = Depends(get_db)
):
    """Todos los artículos; status=all o sin status no filtra"""
    post_filter = BlogPostFilter(category_id=category_id, author_id=author_id, search=search)
    if status_filter and status_filter.lower() != "all":
        post_filter.status = PostStatus.parse(status_filter)

    page = await BlogService(db).list_posts(post_filter, options)
    return ApiResponse(data=AdminPostPage(
        posts=[PostResponse.model_validate(p) for p in page.data],
        pagination=PaginationInfo.from_page(page),
    ))


@router.post("/posts", response_model=ApiResponse[PostResponse], status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    auth: AuthResult = Depends(require_permission("create_content")),
    db: AsyncSession = Depends(get_db)
):
    # Todo estado salvo DRAFT exige publish_content
    if post_data.status != PostStatus.DRAFT and not has_permission(auth.user_role, "publish_content"):
        return error_response(status.HTTP_403_FORBIDDEN, "Permisos insuficientes para publicar")

    post = await BlogService(db).create_post(post_data, author_id=auth.user_id)
    return ApiResponse(data=PostResponse.model_validate(post), message="Artículo creado exitosamente")


@router.get("/posts/{post_id}", response_model=ApiResponse[PostResponse])
async def get_post(
    post_id: str,
    auth: AuthResult = Depends(require_permission("manage_blog")),
    db: AsyncSession = Depends(get_db)
):
    post = await _load_post(BlogService(db), post_id)
    return ApiResponse(data=PostResponse.model_validate(post))


@router.put("/posts/{post_id}", response_model=ApiResponse[PostResponse])
async def update_post(
    post_id: str,
    update_data: PostUpdate,
    request: Request,
    db: AsyncSession = Depends(get_db)
):
    """Edita un artículo: cualquiera con edit_content, o el autor con edit_own_content"""
    service = BlogService(db)
    post = await _load_post(service, post_id)

    result = await verify_content_edit_auth(request, post.author_id)
    if not result.authorized:
        return result.error
    if update_data.status is not None and update_data.status != post.status \
            and not has_permission(result.user_role, "publish_content"):
        return error_response(status.HTTP_403_FORBIDDEN, "Permisos insuficientes para cambiar el estado")

    updated = await service.update_post(post, update_data)
    return ApiResponse(data=PostResponse.model_validate(updated), message="Artículo actualizado exitosamente")


@router.delete("/posts/{post_id}", response_model=ApiResponse[None])
async def delete_post(post_id: str, request: Request, db: AsyncSession = Depends(get_db)):
    service = BlogService(db)
    post = await _load_post(service, post_id)

    result = await verify_content_edit_auth(request, post.author_id)
    if not result.authorized:
        return result.error
    # Borrar contenido ajeno exige delete_content
    if post.author_id != result.user_id and not has_permission(result.user_role, "delete_content"):
        return error_response(status.HTTP_403_FORBIDDEN, "Permisos insuficientes para esta acción")

    await service.delete_post(post.id)
    return ApiResponse(message="Artículo eliminado exitosamente")


@router.post("/posts/{post_id}/publish", response_model=ApiResponse[PostResponse])
async def publish_post(
    post_id: str,
    auth: AuthResult = Depends(require_permission("publish_content")),
    db: AsyncSession = Depends(get_db)
):
    try:
        post = await BlogService(db).publish_post(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")
    return ApiResponse(data=PostResponse.model_validate(post), message="Artículo publicado")


@router.post("/posts/{post_id}/unpublish", response_model=ApiResponse[PostResponse])
async def unpublish_post(
    post_id: str,
    auth: AuthResult = Depends(require_permission("publish_content")),
    db: AsyncSession = Depends(get_db)
):
    try:
        post = await BlogService(db).unpublish_post(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")
    return ApiResponse(data=PostResponse.model_validate(post), message="Artículo despublicado")


@router.post("/posts/{post_id}/archive", response_model=ApiResponse[PostResponse])
async def archive_post(
    post_id: str,
    auth: AuthResult = Depends(require_permission("publish_content")),
    db: AsyncSession = Depends(get_db)
):
    try:
        post = await BlogService(db).archive_post(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")
    return ApiResponse(data=PostResponse.model_validate(post), message="Artículo archivado")


@router.post("/posts/{post_id}/schedule", response_model=ApiResponse[PostResponse])
async def schedule_post(
    post_id: str,
    schedule_data: PostSchedule,
    auth: AuthResult = Depends(require_permission("publish_content")),
    db: AsyncSession = Depends(get_db)
):
    try:
        post = await BlogService(db).schedule_post(post_id, schedule_data.publish_date)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")
    return ApiResponse(data=PostResponse.model_validate(post), message="Artículo programado")


# Categorías
@router.get("/categories", response_model=ApiResponse[List[CategoryResponse]])
async def list_all_categories(
    auth: AuthResult = Depends(require_permission("manage_blog")),
    db: AsyncSession = Depends(get_db)
):
    categories = await BlogService(db).list_categories(active_only=False)
    return ApiResponse(data=[CategoryResponse.model_validate(c) for c in categories])


@router.post("/categories", response_model=ApiResponse[CategoryResponse], status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    auth: AuthResult = Depends(require_permission("manage_blog")),
    db: AsyncSession = Depends(get_db)
):
    try:
        category = await BlogService(db).create_category(category_data)
    except CategoryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ApiResponse(data=CategoryResponse.model_validate(category))


@router.put("/categories/{category_id}", response_model=ApiResponse[CategoryResponse])
async def update_category(
    category_id: str,
    update_data: CategoryUpdate,
    auth: AuthResult = Depends(require_permission("manage_blog")),
    db: AsyncSession = Depends(get_db)
):
    try:
        category = await BlogService(db).update_category(category_id, update_data)
    except CategoryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(data=CategoryResponse.model_validate(category))


@router.delete("/categories/{category_id}", response_model=ApiResponse[None])
async def delete_category(
    category_id: str,
    auth: AuthResult = Depends(require_permission("manage_blog")),
    db: AsyncSession = Depends(get_db)
):
    try:
        await BlogService(db).delete_category(category_id)
    except CategoryNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ApiResponse(message="Categoría eliminada exitosamente")
