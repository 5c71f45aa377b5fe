from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.common import pagination_params
from app.core.db import get_db
from app.domains.blog.schemas import CategoryResponse, PostPage, PostResponse, PostSummary
from app.domains.blog.services import BlogService, PostNotFoundError
from app.domains.common.pagination import PaginationOptions
from app.domains.common.schemas import ApiResponse, PaginationInfo

router = APIRouter(prefix="/api/blog", tags=["blog"])


@router.get("/posts", response_model=ApiResponse[PostPage])
async def list_published_posts(
    options: PaginationOptions = Depends(pagination_params()),
    db: AsyncSession = Depends(get_db)
):
    """Artículos publicados, los más recientes primero"""
    page = await BlogService(db).list_published(options)
    return ApiResponse(data=PostPage(
        posts=[PostSummary.model_validate(p) for p in page.data],
        pagination=PaginationInfo.from_page(page),
    ))


@router.get("/posts/slug/{slug}", response_model=ApiResponse[PostResponse])
async def get_post_by_slug(slug: str, db: AsyncSession = Depends(get_db)):
    try:
        post = await BlogService(db).get_published_by_slug(slug)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")

    return ApiResponse(data=PostResponse.model_validate(post))


@router.post("/posts/{post_id}/view", response_model=ApiResponse[None])
async def register_post_view(post_id: str, db: AsyncSession = Depends(get_db)):
    try:
        await BlogService(db).register_view(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")

    return ApiResponse()


@router.get("/posts/{post_id}/related", response_model=ApiResponse[List[PostSummary]])
async def get_related_posts(post_id: str, db: AsyncSession = Depends(get_db)):
    try:
        related = await BlogService(db).get_related(post_id)
    except PostNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Artículo no encontrado")

    return ApiResponse(data=[PostSummary.model_validate(p) for p in related])


@router.get("/categories", response_model=ApiResponse[List[CategoryResponse]])
async def list_categories(db: AsyncSession = Depends(get_db)):
    categories = await BlogService(db).list_categories(active_only=True)
    return ApiResponse(data=[CategoryResponse.model_validate(c) for c in categories])
