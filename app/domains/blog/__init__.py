from app.domains.blog.entities import BlogPost, Category, FormatConfig, PostStatus
from app.domains.blog.schemas import (
    FormatConfigSchema, PostBase, PostCreate, PostUpdate, PostSchedule,
    PostResponse, PostSummary, PostPage, AdminPostPage,
    CategoryBase, CategoryCreate, CategoryUpdate, CategoryResponse
)

__all__ = [
    "BlogPost", "Category", "FormatConfig", "PostStatus",
    "FormatConfigSchema", "PostBase", "PostCreate", "PostUpdate", "PostSchedule",
    "PostResponse", "PostSummary", "PostPage", "AdminPostPage",
    "CategoryBase", "CategoryCreate", "CategoryUpdate", "CategoryResponse"
]
