from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from app.core.roles import UserRole
from app.domains.common.schemas import CamelModel


class UserResponse(CamelModel):
    """Usuario tal como lo ve el panel de administración"""
    id: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    image_url: str
    role: UserRole
    department: Optional[str] = None
    created_at: Optional[datetime] = None
    last_sign_in_at: Optional[datetime] = None


class RoleUpdate(CamelModel):
    """Cambio de rol de un usuario"""
    user_id: str = Field(..., min_length=1)
    role: UserRole
    department: Optional[str] = None

    @field_validator("role", mode="before")
    @classmethod
    def lower_role(cls, v):
        return v.lower() if isinstance(v, str) else v
