from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import AuthResult, require_permission
from app.core.db import get_db
from app.domains.common.schemas import ApiResponse
from app.domains.legal.schemas import LegalBannerResponse, LegalContentResponse, LegalContentUpdate
from app.domains.legal.services import LegalContentService

router = APIRouter(prefix="/api/legal-content", tags=["legal-content"])


@router.get("", response_model=ApiResponse[List[LegalContentResponse]])
async def get_legal_content(db: AsyncSession = Depends(get_db)):
    contents = await LegalContentService(db).get_all()
    return ApiResponse(data=[LegalContentResponse.model_validate(c) for c in contents])


@router.put("", response_model=ApiResponse[LegalContentResponse])
async def update_legal_content(
    content_data: LegalContentUpdate,
    auth: AuthResult = Depends(require_permission("manage_legal")),
    db: AsyncSession = Depends(get_db)
):
    content = await LegalContentService(db).update(content_data)
    return ApiResponse(
        data=LegalContentResponse.model_validate(content),
        message="Contenido legal actualizado exitosamente",
    )


@router.get("/banners", response_model=ApiResponse[List[LegalBannerResponse]])
async def get_active_banners(db: AsyncSession = Depends(get_db)):
    """Banners activos para mostrar en el sitio"""
    banners = await LegalContentService(db).get_active_banners()
    return ApiResponse(data=[LegalBannerResponse.model_validate(b) for b in banners])
