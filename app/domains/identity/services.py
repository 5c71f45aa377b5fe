import logging
from typing import List

from app.core.roles import UserRole, can_assign_role, can_manage_user, permissions_for
from app.domains.identity.entities import User
from app.domains.identity.schemas import RoleUpdate

logger = logging.getLogger(__name__)

USER_LIST_LIMIT = 100


class UserAdminService:
    """Gestión de usuarios y roles sobre el proveedor de identidad"""

    def __init__(self, identity_provider):
        self.identity_provider = identity_provider

    async def list_users(self) -> List[User]:
        users = await self.identity_provider.list_users(limit=USER_LIST_LIMIT, order_by="-created_at")
        return [User.from_clerk(data) for data in users]

    async def get_user(self, user_id: str) -> User:
        return User.from_clerk(await self.identity_provider.get_user(user_id))

    async def update_role(self, actor_id: str, actor_role: UserRole, data: RoleUpdate) -> User:
        """Asigna rol y departamento; los permisos se copian a la metadata privada"""
        if not can_assign_role(actor_role, data.role):
            raise PermissionError("No tienes permisos para asignar este rol")

        target = await self.get_user(data.user_id)
        if not can_manage_user(actor_role, target.role):
            raise PermissionError("No tienes permisos para gestionar a este usuario")

        await self.identity_provider.update_user_metadata(
            data.user_id,
            public_metadata={"role": data.role.value, "department": data.department or None},
            private_metadata={"permissions": permissions_for(data.role)},
        )
        logger.info(
            "Rol de %s cambiado de %s a %s por %s",
            data.user_id, target.role.value, data.role.value, actor_id,
        )
        return await self.get_user(data.user_id)
