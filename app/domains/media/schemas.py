from datetime import datetime
from typing import Optional

from app.domains.common.schemas import CamelModel


class UploadResponse(CamelModel):
    url: str
    file_name: str
    original_name: str
    size: int
    type: str
    category: str


class MediaFileResponse(CamelModel):
    url: str
    file_name: str
    original_name: Optional[str] = None
    category: Optional[str] = None
    uploaded_at: Optional[datetime] = None


class MediaDelete(CamelModel):
    url: str
