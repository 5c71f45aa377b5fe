from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Text

from app.db.base import BaseModel


class Service(BaseModel):
    __tablename__ = "services"

    name = Column(String(150), nullable=False, index=True)
    description = Column(Text, default="", nullable=False)
    short_description = Column(String(300), nullable=True)
    icon_url = Column(String(1024), nullable=True)
    parent_id = Column(String(24), ForeignKey("services.id"), nullable=True, index=True)
    order = Column(Integer, default=0, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
