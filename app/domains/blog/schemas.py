from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.domains.blog.entities import MAX_TITLE, PostStatus
from app.domains.common.schemas import CamelModel, PaginationInfo


class FormatConfigSchema(CamelModel):
    line_height: float = Field(1.4, gt=0, le=5)
    paragraph_spacing: float = Field(0.5, ge=0, le=10)


class PostBase(CamelModel):
    """Campos editables de un artículo"""
    title: str = Field(..., min_length=1, max_length=MAX_TITLE)
    content: str = Field(..., min_length=1)
    category_id: str = Field(..., min_length=1)
    slug: Optional[str] = None
    excerpt: str = ""
    featured_image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None
    format_config: Optional[FormatConfigSchema] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError("El título no puede estar vacío")
        return v.strip()

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v):
        return [tag.strip() for tag in v if tag and tag.strip()]


class PostCreate(PostBase):
    status: PostStatus = PostStatus.DRAFT
    published_at: Optional[datetime] = None

    @field_validator("status", mode="before")
    @classmethod
    def upper_status(cls, v):
        return v.upper() if isinstance(v, str) else v


class PostUpdate(PostBase):
    """Reemplazo del artículo; sin status se conserva el actual"""
    status: Optional[PostStatus] = None
    published_at: Optional[datetime] = None

    @field_validator("status", mode="before")
    @classmethod
    def upper_status(cls, v):
        return v.upper() if isinstance(v, str) else v


class PostSchedule(CamelModel):
    publish_date: datetime


class PostResponse(CamelModel):
    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    featured_image: Optional[str] = None
    author_id: str
    category_id: str
    tags: List[str]
    status: PostStatus
    seo_title: str
    seo_description: str
    format_config: FormatConfigSchema
    view_count: int
    published_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class PostSummary(CamelModel):
    """Tarjeta del listado público"""
    id: str
    title: str
    slug: str
    excerpt: str
    featured_image: Optional[str] = None
    author_id: str
    category_id: str
    tags: List[str]
    published_at: Optional[datetime] = None
    view_count: int


class PostPage(CamelModel):
    posts: List[PostSummary]
    pagination: PaginationInfo


class AdminPostPage(CamelModel):
    posts: List[PostResponse]
    pagination: PaginationInfo


class CategoryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[str] = None
    order: int = 0
    is_active: bool = True

    @field_validator("parent_id")
    @classmethod
    def empty_parent_is_root(cls, v):
        return v or None


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class CategoryResponse(CamelModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    parent_id: Optional[str] = None
    order: int
    is_active: bool
    is_subcategory: bool
    created_at: datetime
    updated_at: datetime
