import logging
from typing import List

from app.domains.media.entities import (
    DEFAULT_CATEGORY,
    MAX_UPLOAD_BYTES,
    FileInfo,
    UploadedFile,
    blob_path,
    build_file_name,
    parse_file_info,
    validate_category,
    validate_image,
)

logger = logging.getLogger(__name__)


class MediaService:
    """Subida de imágenes al almacenamiento de blobs"""

    def __init__(self, blob_store, max_bytes: int = MAX_UPLOAD_BYTES):
        self.blob_store = blob_store
        self.max_bytes = max_bytes

    async def upload_image(self, body: bytes, original_name: str, content_type: str, category: str = None) -> UploadedFile:
        category = category or DEFAULT_CATEGORY
        # Validar antes de tocar la red
        validate_category(category)
        validate_image(content_type, len(body), self.max_bytes)

        file_name = build_file_name(category, original_name)
        url = await self.blob_store.put(blob_path(category, file_name), body, content_type)
        logger.info("Imagen subida: %s (%d bytes)", file_name, len(body))

        return UploadedFile(
            url=url,
            file_name=file_name,
            original_name=original_name,
            size=len(body),
            type=content_type,
            category=category,
        )

    async def list_images(self, category: str = None) -> List[FileInfo]:
        if category:
            validate_category(category)
        prefix = f"uploads/{category}/" if category else "uploads/"
        blobs = await self.blob_store.list(prefix=prefix)
        return [parse_file_info(blob["url"]) for blob in blobs]

    async def delete_image(self, url: str) -> None:
        await self.blob_store.delete([url])
        logger.info("Imagen eliminada: %s", url)
