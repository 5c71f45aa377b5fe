from datetime import datetime

from sqlalchemy import Column, DateTime, String

from app.core.db import Base
from app.domains.common.ids import new_object_id


class BaseModel(Base):
    """Columnas comunes: ID de 24 caracteres y fechas de auditoría"""

    __abstract__ = True

    id = Column(String(24), primary_key=True, default=new_object_id)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
