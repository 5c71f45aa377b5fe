from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import quote

from app.core.roles import UserRole, parse_role

AVATAR_URL = "https://ui-avatars.com/api/?name={name}&background=B79F76&color=fff"


def _from_millis(value: Optional[int]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


class User:
    """Usuario del panel. Vive solo en Clerk; aquí es una vista de lectura"""

    def __init__(
        self,
        id: str,
        email: str,
        first_name: str = "",
        last_name: str = "",
        image_url: Optional[str] = None,
        role: UserRole = UserRole.USER,
        department: Optional[str] = None,
        created_at: Optional[datetime] = None,
        last_sign_in_at: Optional[datetime] = None,
    ):
        self.id = id
        self.email = email
        self.first_name = first_name or ""
        self.last_name = last_name or ""
        self.role = role
        self.department = department or None
        self.created_at = created_at
        self.last_sign_in_at = last_sign_in_at
        self.image_url = image_url or AVATAR_URL.format(name=quote(f"{self.first_name} {self.last_name}"))

    @property
    def full_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.email

    @classmethod
    def from_clerk(cls, data: Dict[str, Any]) -> "User":
        """Construye el usuario a partir de la respuesta de la API de Clerk"""
        emails = data.get("email_addresses") or []
        public_metadata = data.get("public_metadata") or {}
        return cls(
            id=data["id"],
            email=emails[0].get("email_address", "") if emails else "",
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            image_url=data.get("image_url"),
            role=parse_role(public_metadata.get("role")),
            department=public_metadata.get("department"),
            created_at=_from_millis(data.get("created_at")),
            last_sign_in_at=_from_millis(data.get("last_sign_in_at")),
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role.value})"
