from app.db.repositories.base import RepositoryError
from app.db.repositories.attorney_repository import AttorneyFilters, AttorneyRepository
from app.db.repositories.blog_repository import BlogPostFilter, BlogPostRepository, CategoryRepository
from app.db.repositories.service_repository import ServiceRepository
from app.db.repositories.legal_content_repository import LegalContentRepository

__all__ = [
    "RepositoryError",
    "AttorneyFilters",
    "AttorneyRepository",
    "BlogPostFilter",
    "BlogPostRepository",
    "CategoryRepository",
    "ServiceRepository",
    "LegalContentRepository"
]
