from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from app.db.base import BaseModel


class Attorney(BaseModel):
    __tablename__ = "attorneys"

    slug = Column(String(150), unique=True, index=True, nullable=True)
    nombre = Column(String(100), nullable=False, index=True)
    cargo = Column(String(100), nullable=False)
    especializaciones = Column(JSON, default=list, nullable=False)
    servicios_que_atiende = Column(JSON, default=list, nullable=False)
    experiencia_anios = Column(Integer, default=0, nullable=False)
    educacion = Column(JSON, default=list, nullable=False)
    idiomas = Column(JSON, default=list, nullable=False)
    correo = Column(String(255), unique=True, index=True, nullable=False)
    telefono = Column(String(20), nullable=False)
    biografia = Column(Text, nullable=False)
    logros = Column(JSON, default=list, nullable=False)
    casos_destacados = Column(JSON, default=list, nullable=False)
    imagen_url = Column(String(1024), nullable=True)
    linked_in = Column(String(512), nullable=True)
    es_socio = Column(Boolean, default=False, nullable=False, index=True)
    descripcion_corta = Column(String(200), nullable=False)
    activo = Column(Boolean, default=True, nullable=False, index=True)
