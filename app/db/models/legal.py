from sqlalchemy import Boolean, Column, String, Text

from app.db.base import BaseModel


class LegalContent(BaseModel):
    __tablename__ = "legal_content"

    type = Column(String(20), unique=True, index=True, nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    banner_text = Column(Text, default="", nullable=False)
    banner_active = Column(Boolean, default=False, nullable=False)
