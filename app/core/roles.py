from enum import Enum
from typing import Any, Dict, List


class UserRole(str, Enum):
    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    CONTENT_CREATOR = "content_creator"
    DEVELOPER = "developer"
    USER = "user"


ROLE_PERMISSIONS: Dict[UserRole, List[str]] = {
    UserRole.SUPERADMIN: [
        "access_admin",      # Acceso al panel admin
        "manage_users",
        "manage_roles",
        "manage_attorneys",
        "manage_services",
        "manage_blog",       # Ver/editar todos los posts
        "create_content",
        "edit_content",      # Editar cualquier post
        "delete_content",
        "publish_content",
        "manage_media",
        "manage_legal",
        "manage_system",
        "view_analytics",
        "system_admin",
        "database_access",
        "api_management",
    ],
    UserRole.ADMIN: [
        "access_admin",
        "manage_users",
        "manage_attorneys",
        "manage_services",
        "manage_blog",
        "create_content",
        "edit_content",
        "delete_content",
        "publish_content",
        "manage_media",
        "manage_legal",
        "view_analytics",
    ],
    UserRole.CONTENT_CREATOR: [
        "access_admin",
        "manage_blog",
        "create_content",
        "edit_own_content",  # Solo sus propios posts
        "publish_content",
        "manage_media",
    ],
    UserRole.DEVELOPER: [
        "access_admin",
        "manage_blog",
        "create_content",
        "edit_content",
        "manage_media",
        "manage_system",
        "view_analytics",
        "system_admin",
        "database_access",
        "api_management",
        "debug_access",
        "deploy_code",
    ],
    UserRole.USER: [
        "view_content",      # Sin access_admin
    ],
}

ROLE_HIERARCHY: Dict[UserRole, int] = {
    UserRole.SUPERADMIN: 5,
    UserRole.ADMIN: 4,
    UserRole.DEVELOPER: 3,
    UserRole.CONTENT_CREATOR: 2,
    UserRole.USER: 1,
}

ROLE_DISPLAY_NAMES: Dict[UserRole, str] = {
    UserRole.SUPERADMIN: "Super Administrador",
    UserRole.ADMIN: "Administrador",
    UserRole.DEVELOPER: "Desarrollador",
    UserRole.CONTENT_CREATOR: "Creador de Contenido",
    UserRole.USER: "Usuario",
}


def parse_role(value: Any) -> UserRole:
    """Convierte el valor de metadata en un rol; cualquier cosa desconocida es USER"""
    if isinstance(value, UserRole):
        return value
    try:
        return UserRole(str(value).lower())
    except ValueError:
        return UserRole.USER


def permissions_for(role: UserRole) -> List[str]:
    return list(ROLE_PERMISSIONS.get(role, []))


def has_permission(role: UserRole, permission: str) -> bool:
    return permission in ROLE_PERMISSIONS.get(role, [])


def can_manage_user(manager_role: UserRole, target_role: UserRole) -> bool:
    """Solo se gestiona a usuarios con jerarquía estrictamente menor"""
    return ROLE_HIERARCHY.get(manager_role, 0) > ROLE_HIERARCHY.get(target_role, 0)


def can_assign_role(manager_role: UserRole, role_to_assign: UserRole) -> bool:
    # Solo SUPERADMIN puede asignar SUPERADMIN
    if role_to_assign == UserRole.SUPERADMIN:
        return manager_role == UserRole.SUPERADMIN
    return ROLE_HIERARCHY.get(manager_role, 0) >= ROLE_HIERARCHY.get(role_to_assign, 0)


def get_role_display_name(role: UserRole) -> str:
    return ROLE_DISPLAY_NAMES[role]
