from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.domains.attorneys.entities import (
    MAX_BIOGRAFIA,
    MAX_CARGO,
    MAX_DESCRIPCION_CORTA,
    MAX_EXPERIENCIA,
    MAX_NOMBRE,
)
from app.domains.common.schemas import CamelModel, PaginationInfo


class AttorneyBase(CamelModel):
    """Datos editables de un abogado"""
    nombre: str = Field(..., min_length=1, max_length=MAX_NOMBRE)
    cargo: str = Field(..., min_length=1, max_length=MAX_CARGO)
    especializaciones: List[str] = Field(default_factory=list)
    servicios_que_atiende: List[str] = Field(default_factory=list)
    experiencia_anios: int = Field(0, ge=0, le=MAX_EXPERIENCIA)
    educacion: List[str] = Field(default_factory=list)
    idiomas: List[str] = Field(default_factory=list)
    correo: str
    telefono: str
    biografia: str = Field(..., min_length=1, max_length=MAX_BIOGRAFIA)
    logros: List[str] = Field(default_factory=list)
    casos_destacados: List[str] = Field(default_factory=list)
    imagen_url: Optional[str] = None
    linked_in: Optional[str] = None
    es_socio: bool = False
    descripcion_corta: str = Field(..., min_length=1, max_length=MAX_DESCRIPCION_CORTA)

    @field_validator("nombre", "cargo")
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("El campo no puede estar vacío")
        return v.strip()


class AttorneyCreate(AttorneyBase):
    """Alta de abogado"""
    activo: bool = True


class AttorneyUpdate(CamelModel):
    """Actualización parcial: solo se aplican los campos enviados"""
    nombre: Optional[str] = Field(None, min_length=1, max_length=MAX_NOMBRE)
    cargo: Optional[str] = Field(None, min_length=1, max_length=MAX_CARGO)
    especializaciones: Optional[List[str]] = None
    servicios_que_atiende: Optional[List[str]] = None
    experiencia_anios: Optional[int] = Field(None, ge=0, le=MAX_EXPERIENCIA)
    educacion: Optional[List[str]] = None
    idiomas: Optional[List[str]] = None
    correo: Optional[str] = None
    telefono: Optional[str] = None
    biografia: Optional[str] = Field(None, min_length=1, max_length=MAX_BIOGRAFIA)
    logros: Optional[List[str]] = None
    casos_destacados: Optional[List[str]] = None
    imagen_url: Optional[str] = None
    linked_in: Optional[str] = None
    es_socio: Optional[bool] = None
    descripcion_corta: Optional[str] = Field(None, min_length=1, max_length=MAX_DESCRIPCION_CORTA)
    activo: Optional[bool] = None
    slug: Optional[str] = None


class AttorneyResponse(AttorneyBase):
    id: str
    slug: Optional[str] = None
    activo: bool
    fecha_creacion: datetime
    fecha_actualizacion: datetime


class AttorneyListItem(CamelModel):
    """Versión resumida para tarjetas y resultados de búsqueda"""
    id: str
    slug: Optional[str] = None
    nombre: str
    cargo: str
    especializaciones: List[str]
    servicios_que_atiende: List[str]
    experiencia_anios: int
    imagen_url: Optional[str] = None
    es_socio: bool
    descripcion_corta: str


class AttorneyPage(CamelModel):
    attorneys: List[AttorneyResponse]
    pagination: PaginationInfo


class SlugMigrationItem(CamelModel):
    id: str
    nombre: str
    slug: Optional[str] = None
    status: str
    error: Optional[str] = None


class AttorneySlugLink(CamelModel):
    nombre: str
    slug: Optional[str] = None
    url: Optional[str] = None


class SlugMigrationReport(CamelModel):
    total: int
    updated: int
    failed: int
    results: List[SlugMigrationItem]
    all_attorneys: List[AttorneySlugLink]


class SlugStatusReport(CamelModel):
    total_attorneys: int
    attorneys_with_slug: int
    attorneys_without_slug: int
    needs_migration: bool
    attorneys: List[AttorneySlugLink]
