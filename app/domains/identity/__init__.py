from app.domains.identity.entities import User
from app.domains.identity.schemas import UserResponse, RoleUpdate
from app.domains.identity.services import UserAdminService

__all__ = [
    "User",
    "UserResponse", "RoleUpdate",
    "UserAdminService"
]
