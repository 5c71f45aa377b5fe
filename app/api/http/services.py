from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthResult, require_permission
from app.core.db import get_db
from app.domains.attorneys.schemas import AttorneyListItem
from app.domains.common.schemas import ApiResponse
from app.domains.legal_services.schemas import ServiceCreate, ServiceResponse, ServiceUpdate
from app.domains.legal_services.services import LegalServiceService, ServiceNotFoundError

router = APIRouter(prefix="/api/services", tags=["services"])


@router.get("", response_model=ApiResponse[List[ServiceResponse]])
async def list_services(
    active: bool = Query(True),
    parent_id: Optional[str] = Query(None, alias="parentId"),
    parents_only: bool = Query(False, alias="parentsOnly"),
    db: AsyncSession = Depends(get_db)
):
    """Catálogo de servicios; active=false incluye los inactivos"""
    service = LegalServiceService(db)
    if parent_id:
        services = await service.get_children(parent_id)
    elif parents_only:
        services = await service.get_parent_services()
    else:
        services = await service.list_services(active_only=active)

    return ApiResponse(data=[ServiceResponse.model_validate(s) for s in services])


@router.post("", response_model=ApiResponse[ServiceResponse], status_code=status.HTTP_201_CREATED)
async def create_service(
    service_data: ServiceCreate,
    auth: AuthResult = Depends(require_permission("manage_services")),
    db: AsyncSession = Depends(get_db)
):
    created = await LegalServiceService(db).create_service(service_data)
    return ApiResponse(data=ServiceResponse.model_validate(created), message="Servicio creado exitosamente")


@router.get("/{service_id}", response_model=ApiResponse[ServiceResponse])
async def get_service(service_id: str, db: AsyncSession = Depends(get_db)):
    """Por ID o por slug del nombre"""
    try:
        found = await LegalServiceService(db).get_service(service_id)
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ApiResponse(data=ServiceResponse.model_validate(found))


@router.get("/{service_id}/attorneys", response_model=ApiResponse[List[AttorneyListItem]])
async def get_service_attorneys(service_id: str, db: AsyncSession = Depends(get_db)):
    try:
        attorneys = await LegalServiceService(db).get_attorneys_for_service(service_id)
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ApiResponse(data=[AttorneyListItem.model_validate(a) for a in attorneys])


@router.put("/{service_id}", response_model=ApiResponse[ServiceResponse])
async def update_service(
    service_id: str,
    update_data: ServiceUpdate,
    auth: AuthResult = Depends(require_permission("manage_services")),
    db: AsyncSession = Depends(get_db)
):
    try:
        updated = await LegalServiceService(db).update_service(service_id, update_data)
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ApiResponse(data=ServiceResponse.model_validate(updated), message="Servicio actualizado exitosamente")


@router.delete("/{service_id}", response_model=ApiResponse[None])
async def delete_service(
    service_id: str,
    auth: AuthResult = Depends(require_permission("manage_services")),
    db: AsyncSession = Depends(get_db)
):
    try:
        await LegalServiceService(db).delete_service(service_id)
    except ServiceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ApiResponse(message="Servicio eliminado exitosamente")
