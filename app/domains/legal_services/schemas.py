from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.domains.common.schemas import CamelModel
from app.domains.legal_services.entities import MAX_NAME


class ServiceBase(CamelModel):
    """Datos editables de un servicio"""
    name: str = Field(..., min_length=1, max_length=MAX_NAME)
    description: str = ""
    short_description: Optional[str] = None
    icon_url: Optional[str] = None
    parent_id: Optional[str] = None
    order: int = Field(0, ge=0)
    is_active: bool = True

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("El nombre del servicio no puede estar vacío")
        return v.strip()

    @field_validator("parent_id")
    @classmethod
    def empty_parent_is_root(cls, v):
        return v or None


class ServiceCreate(ServiceBase):
    pass


class ServiceUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=MAX_NAME)
    description: Optional[str] = None
    short_description: Optional[str] = None
    icon_url: Optional[str] = None
    parent_id: Optional[str] = None
    order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class ServiceResponse(ServiceBase):
    id: str
    is_parent: bool
    is_child: bool
    created_at: datetime
    updated_at: datetime


class ServiceTreeNode(CamelModel):
    """Nodo del árbol de servicios de un abogado"""
    id: str
    name: str
    description: str
    short_description: Optional[str] = None
    icon_url: Optional[str] = None
    parent_id: Optional[str] = None
    order: int
    children: List["ServiceTreeNode"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node) -> "ServiceTreeNode":
        service = node.service
        return cls(
            id=service.id,
            name=service.name,
            description=service.description,
            short_description=service.short_description,
            icon_url=service.icon_url,
            parent_id=service.parent_id,
            order=service.order,
            children=[cls.from_node(child) for child in node.children],
        )


ServiceTreeNode.model_rebuild()
