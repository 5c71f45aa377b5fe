from app.db.models.attorney import Attorney
from app.db.models.blog import BlogCategory, BlogPost
from app.db.models.service import Service
from app.db.models.legal import LegalContent

__all__ = [
    "Attorney",
    "BlogCategory",
    "BlogPost",
    "Service",
    "LegalContent"
]
