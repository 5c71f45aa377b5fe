from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthResult, require_permission
from app.core.db import get_db
from app.domains.attorneys.schemas import SlugMigrationReport, SlugStatusReport
from app.domains.attorneys.services import AttorneyService
from app.domains.common.schemas import ApiResponse
from app.domains.identity.schemas import RoleUpdate, UserResponse
from app.domains.identity.services import UserAdminService

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _user_admin(request: Request) -> UserAdminService:
    return UserAdminService(request.app.state.identity_provider)


@router.get("/users", response_model=ApiResponse[List[UserResponse]])
async def list_users(
    auth: AuthResult = Depends(require_permission("manage_users")),
    service: UserAdminService = Depends(_user_admin)
):
    """Usuarios de Clerk, los más recientes primero"""
    users = await service.list_users()
    return ApiResponse(data=[UserResponse.model_validate(u) for u in users])


@router.put("/users", response_model=ApiResponse[UserResponse])
async def update_user_role(
    role_data: RoleUpdate,
    auth: AuthResult = Depends(require_permission("manage_users")),
    service: UserAdminService = Depends(_user_admin)
):
    user = await service.update_role(auth.user_id, auth.user_role, role_data)
    return ApiResponse(data=UserResponse.model_validate(user), message="Rol actualizado exitosamente")


@router.get("/migrate-slugs", response_model=ApiResponse[SlugStatusReport])
async def slug_migration_status(
    auth: AuthResult = Depends(require_permission("manage_attorneys")),
    db: AsyncSession = Depends(get_db)
):
    report = await AttorneyService(db).slug_status()
    return ApiResponse(data=report)


@router.post("/migrate-slugs", response_model=ApiResponse[SlugMigrationReport])
async def migrate_slugs(
    auth: AuthResult = Depends(require_permission("manage_attorneys")),
    db: AsyncSession = Depends(get_db)
):
    """Asigna slug a los abogados que no lo tienen"""
    report = await AttorneyService(db).migrate_slugs()
    message = "Migración completada" if report.total else "Todos los abogados ya tienen slug"
    return ApiResponse(data=report, message=message)
