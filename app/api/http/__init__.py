from app.api.http.health import router as health_router
from app.api.http.attorneys import router as attorneys_router
from app.api.http.services import router as services_router
from app.api.http.blog import router as blog_router
from app.api.http.admin_blog import router as admin_blog_router
from app.api.http.admin import router as admin_router
from app.api.http.media import router as media_router
from app.api.http.legal_content import router as legal_content_router

__all__ = [
    "health_router",
    "attorneys_router",
    "services_router",
    "blog_router",
    "admin_blog_router",
    "admin_router",
    "media_router",
    "legal_content_router"
]
