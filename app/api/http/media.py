from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, Request, UploadFile, status

from app.core.auth import AuthResult, require_permission
from app.domains.common.schemas import ApiResponse
from app.domains.media.entities import DEFAULT_CATEGORY
from app.domains.media.schemas import MediaDelete, MediaFileResponse, UploadResponse
from app.domains.media.services import MediaService

router = APIRouter(prefix="/api", tags=["media"])


def _media_service(request: Request) -> MediaService:
    return MediaService(request.app.state.blob_store, request.app.state.settings.upload_max_bytes)


@router.post("/upload", response_model=ApiResponse[UploadResponse])
async def upload_image(
    file: Optional[UploadFile] = File(None),
    category: str = Form(DEFAULT_CATEGORY),
    auth: AuthResult = Depends(require_permission("manage_media")),
    service: MediaService = Depends(_media_service)
):
    """Sube una imagen a uploads/{category}/"""
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No se proporcionó ningún archivo")

    body = await file.read()
    uploaded = await service.upload_image(body, file.filename, file.content_type, category or DEFAULT_CATEGORY)
    return ApiResponse(data=UploadResponse.model_validate(uploaded), message="Imagen subida exitosamente")


@router.get("/media", response_model=ApiResponse[List[MediaFileResponse]])
async def list_media(
    category: Optional[str] = Query(None),
    auth: AuthResult = Depends(require_permission("manage_media")),
    service: MediaService = Depends(_media_service)
):
    files = await service.list_images(category)
    return ApiResponse(data=[MediaFileResponse.model_validate(f) for f in files])


@router.delete("/media", response_model=ApiResponse[None])
async def delete_media(
    media_data: MediaDelete,
    auth: AuthResult = Depends(require_permission("manage_media")),
    service: MediaService = Depends(_media_service)
):
    await service.delete_image(media_data.url)
    return ApiResponse(message="Imagen eliminada exitosamente")
