from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.http.common import pagination_params
from app.core.auth import AuthResult, require_permission
from app.core.db import get_db
from app.db.repositories.attorney_repository import AttorneyFilters
from app.domains.attorneys.schemas import (
    AttorneyCreate,
    AttorneyListItem,
    AttorneyPage,
    AttorneyResponse,
    AttorneyUpdate,
)
from app.domains.attorneys.services import AttorneyNotFoundError, AttorneyService
from app.domains.common.pagination import PaginationOptions
from app.domains.common.schemas import ApiResponse, PaginationInfo
from app.domains.legal_services.schemas import ServiceTreeNode
from app.domains.legal_services.services import LegalServiceService

router = APIRouter(prefix="/api/attorneys", tags=["attorneys"])


@router.get("", response_model=ApiResponse[AttorneyPage])
async def list_attorneys(
    activo: Optional[bool] = Query(None),
    es_socio: Optional[bool] = Query(None, alias="esSocio"),
    especializacion: Optional[str] = Query(None),
    nombre: Optional[str] = Query(None),
    options: PaginationOptions = Depends(pagination_params()),
    db: AsyncSession = Depends(get_db)
):
    """Listado público con filtros y paginación"""
    filters = AttorneyFilters(activo=activo, es_socio=es_socio, especializacion=especializacion, nombre=nombre)
    page = await AttorneyService(db).list_attorneys(filters, options)

    return ApiResponse(data=AttorneyPage(
        attorneys=[AttorneyResponse.model_validate(a) for a in page.data],
        pagination=PaginationInfo.from_page(page),
    ))


@router.post("", response_model=ApiResponse[AttorneyResponse], status_code=status.HTTP_201_CREATED)
async def create_attorney(
    attorney_data: AttorneyCreate,
    auth: AuthResult = Depends(require_permission("manage_attorneys")),
    db: AsyncSession = Depends(get_db)
):
    attorney = await AttorneyService(db).create_attorney(attorney_data)
    return ApiResponse(data=AttorneyResponse.model_validate(attorney), message="Abogado creado exitosamente")


@router.get("/active", response_model=ApiResponse[List[AttorneyListItem]])
async def get_active_attorneys(db: AsyncSession = Depends(get_db)):
    attorneys = await AttorneyService(db).get_active_attorneys()
    return ApiResponse(data=[AttorneyListItem.model_validate(a) for a in attorneys])


@router.get("/partners", response_model=ApiResponse[List[AttorneyListItem]])
async def get_partners(db: AsyncSession = Depends(get_db)):
    attorneys = await AttorneyService(db).get_partners()
    return ApiResponse(data=[AttorneyListItem.model_validate(a) for a in attorneys])


@router.get("/search", response_model=ApiResponse[List[AttorneyListItem]])
async def search_attorneys(q: str = Query(""), db: AsyncSession = Depends(get_db)):
    """Búsqueda por nombre, cargo, biografía o especialización"""
    attorneys = await AttorneyService(db).search_attorneys(q)
    return ApiResponse(data=[AttorneyListItem.model_validate(a) for a in attorneys])


@router.get("/specialization/{especializacion}", response_model=ApiResponse[List[AttorneyListItem]])
async def get_by_specialization(especializacion: str, db: AsyncSession = Depends(get_db)):
    attorneys = await AttorneyService(db).get_by_specialization(especializacion)
    return ApiResponse(data=[AttorneyListItem.model_validate(a) for a in attorneys])


@router.get("/{id_or_slug}", response_model=ApiResponse[AttorneyResponse])
async def get_attorney(id_or_slug: str, db: AsyncSession = Depends(get_db)):
    try:
        attorney = await AttorneyService(db).get_attorney(id_or_slug)
    except AttorneyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ApiResponse(data=AttorneyResponse.model_validate(attorney))


@router.get("/{id_or_slug}/services", response_model=ApiResponse[List[ServiceTreeNode]])
async def get_attorney_services(id_or_slug: str, db: AsyncSession = Depends(get_db)):
    """Servicios que atiende el abogado, agrupados bajo su servicio padre"""
    try:
        attorney = await AttorneyService(db).get_attorney(id_or_slug)
    except AttorneyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    tree = await LegalServiceService(db).get_service_tree_for_attorney(attorney)
    return ApiResponse(data=[ServiceTreeNode.from_node(node) for node in tree])


@router.put("/{id_or_slug}", response_model=ApiResponse[AttorneyResponse])
async def update_attorney(
    id_or_slug: str,
    update_data: AttorneyUpdate,
    auth: AuthResult = Depends(require_permission("manage_attorneys")),
    db: AsyncSession = Depends(get_db)
):
    try:
        attorney = await AttorneyService(db).update_attorney(id_or_slug, update_data)
    except AttorneyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ApiResponse(data=AttorneyResponse.model_validate(attorney), message="Abogado actualizado exitosamente")


@router.delete("/{id_or_slug}", response_model=ApiResponse[None])
async def delete_attorney(
    id_or_slug: str,
    auth: AuthResult = Depends(require_permission("manage_attorneys")),
    db: AsyncSession = Depends(get_db)
):
    try:
        await AttorneyService(db).delete_attorney(id_or_slug)
    except AttorneyNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return ApiResponse(message="Abogado eliminado exitosamente")
