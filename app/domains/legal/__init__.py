from app.domains.legal.entities import LegalContent, LegalContentType, default_legal_contents
from app.domains.legal.schemas import LegalContentUpdate, LegalContentResponse, LegalBannerResponse

__all__ = [
    "LegalContent", "LegalContentType", "default_legal_contents",
    "LegalContentUpdate", "LegalContentResponse", "LegalBannerResponse"
]
