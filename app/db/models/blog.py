from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from app.db.base import BaseModel


class BlogCategory(BaseModel):
    __tablename__ = "blog_categories"

    name = Column(String(100), nullable=False)
    slug = Column(String(150), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)
    parent_id = Column(String(24), ForeignKey("blog_categories.id"), nullable=True)
    order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)


class BlogPost(BaseModel):
    __tablename__ = "blog_posts"

    title = Column(String(200), nullable=False)
    slug = Column(String(250), unique=True, index=True, nullable=False)
    excerpt = Column(Text, default="", nullable=False)
    content = Column(Text, default="", nullable=False)
    featured_image = Column(String(1024), nullable=True)
    # El autor es un usuario de Clerk, sin clave foránea
    author_id = Column(String(64), index=True, nullable=False)
    category_id = Column(String(24), index=True, nullable=False)
    tags = Column(JSON, default=list, nullable=False)
    status = Column(String(20), default="DRAFT", index=True, nullable=False)
    published_at = Column(DateTime, nullable=True)
    seo_title = Column(String(200), nullable=True)
    seo_description = Column(String(500), nullable=True)
    view_count = Column(Integer, default=0, nullable=False)
    format_config = Column(JSON, nullable=True)
