import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.responses import JSONResponse

from app.core.roles import UserRole, has_permission, parse_role

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    """Resultado de la verificación de autenticación para las APIs"""

    authorized: bool
    user_id: Optional[str] = None
    user_role: Optional[UserRole] = None
    error: Optional[JSONResponse] = None
    message: Optional[str] = None
    can_edit_any: bool = False


def _denied(
    status_code: int,
    message: str,
    user_id: Optional[str] = None,
    user_role: Optional[UserRole] = None,
) -> AuthResult:
    return AuthResult(
        authorized=False,
        user_id=user_id,
        user_role=user_role,
        error=JSONResponse(status_code=status_code, content={"success": False, "error": message}),
        message=message,
    )


async def verify_api_auth(request: Request, required_permission: Optional[str] = None) -> AuthResult:
    """Verifica sesión y, opcionalmente, un permiso del rol del usuario"""
    provider = request.app.state.identity_provider

    try:
        user_id = provider.authenticate_request(request)

        if not user_id:
            return _denied(status.HTTP_401_UNAUTHORIZED, "No autorizado - Debes iniciar sesión")

        user = await provider.get_user(user_id)
        public_metadata = user.get("public_metadata") or {}
        user_role = parse_role(public_metadata.get("role"))

        if required_permission and not has_permission(user_role, required_permission):
            logger.warning("Usuario %s (%s) sin permiso %s", user_id, user_role.value, required_permission)
            return _denied(
                status.HTTP_403_FORBIDDEN,
                "Permisos insuficientes para esta acción",
                user_id=user_id,
                user_role=user_role,
            )

        return AuthResult(authorized=True, user_id=user_id, user_role=user_role)
    except Exception as e:
        logger.error("Error en verificación de autenticación: %s", e)
        return _denied(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error de autenticación")


async def verify_content_edit_auth(request: Request, content_author_id: Optional[str]) -> AuthResult:
    """Permite editar cualquier contenido (edit_content) o solo el propio (edit_own_content)"""
    result = await verify_api_auth(request)
    if not result.authorized:
        return result

    if has_permission(result.user_role, "edit_content"):
        result.can_edit_any = True
        return result

    if has_permission(result.user_role, "edit_own_content") and content_author_id == result.user_id:
        return result

    return _denied(
        status.HTTP_403_FORBIDDEN,
        "Solo puedes editar tu propio contenido",
        user_id=result.user_id,
        user_role=result.user_role,
    )


def require_permission(permission: str):
    """Fábrica de dependencias: exige un permiso concreto"""

    async def _require_permission(request: Request) -> AuthResult:
        result = await verify_api_auth(request, permission)
        if not result.authorized:
            raise HTTPException(status_code=result.error.status_code, detail=result.message)
        return result

    return _require_permission
