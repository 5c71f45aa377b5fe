from datetime import datetime
from typing import Optional

from app.domains.common.errors import DomainValidationError
from app.domains.common.ids import new_object_id

MAX_NAME = 150


class Service:
    """Área de práctica del despacho; parent_id agrupa servicios en dos niveles"""

    def __init__(
        self,
        name: str,
        description: str = "",
        short_description: Optional[str] = None,
        icon_url: Optional[str] = None,
        parent_id: Optional[str] = None,
        order: int = 0,
        is_active: bool = True,
        id: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        if not name or not name.strip():
            raise DomainValidationError("El nombre del servicio es requerido")
        if len(name) > MAX_NAME:
            raise DomainValidationError(f"El nombre del servicio no puede exceder {MAX_NAME} caracteres")
        if order is None or order < 0:
            raise DomainValidationError("El orden no puede ser negativo")

        self.id = id or new_object_id()
        self.name = name.strip()
        self.description = description or ""
        self.short_description = short_description or None
        self.icon_url = icon_url or None
        # "" también significa servicio raíz
        self.parent_id = parent_id or None
        self.order = order
        self.is_active = is_active
        self.created_at = created_at or datetime.utcnow()
        self.updated_at = updated_at or datetime.utcnow()

    @property
    def is_parent(self) -> bool:
        return self.parent_id is None

    @property
    def is_child(self) -> bool:
        return self.parent_id is not None

    def _touch(self) -> None:
        self.updated_at = datetime.utcnow()

    def update_name(self, name: str) -> None:
        if not name or not name.strip():
            raise DomainValidationError("El nombre del servicio es requerido")
        if len(name) > MAX_NAME:
            raise DomainValidationError(f"El nombre del servicio no puede exceder {MAX_NAME} caracteres")
        self.name = name.strip()
        self._touch()

    def update_description(self, description: str, short_description: Optional[str] = None) -> None:
        self.description = description or ""
        self.short_description = short_description or None
        self._touch()

    def update_icon(self, icon_url: Optional[str]) -> None:
        self.icon_url = icon_url or None
        self._touch()

    def update_parent(self, parent_id: Optional[str]) -> None:
        if parent_id and parent_id == self.id:
            raise DomainValidationError("Un servicio no puede ser su propio padre")
        self.parent_id = parent_id or None
        self._touch()

    def update_order(self, order: int) -> None:
        if order is None or order < 0:
            raise DomainValidationError("El orden no puede ser negativo")
        self.order = order
        self._touch()

    def activate(self) -> None:
        self.is_active = True
        self._touch()

    def deactivate(self) -> None:
        self.is_active = False
        self._touch()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Service):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Service(id={self.id}, name={self.name})"
