from datetime import datetime
from typing import Optional

from pydantic import Field

from app.domains.common.schemas import CamelModel
from app.domains.legal.entities import LegalContentType


class LegalContentUpdate(CamelModel):
    """Reemplazo de un texto legal"""
    type: LegalContentType
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    banner_text: str = ""
    banner_active: bool = False


class LegalContentResponse(CamelModel):
    id: Optional[str] = None
    type: LegalContentType
    title: str
    content: str
    banner_text: str
    banner_active: bool
    last_updated: datetime


class LegalBannerResponse(CamelModel):
    """Banner activo que el sitio muestra sobre el contenido"""
    type: LegalContentType
    title: str
    banner_text: str
    last_updated: datetime
