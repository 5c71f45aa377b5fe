from app.domains.media.entities import (
    ALLOWED_IMAGE_TYPES, MAX_UPLOAD_BYTES, DEFAULT_CATEGORY, FileInfo, UploadedFile,
    validate_image, build_file_name, parse_file_info
)
from app.domains.media.schemas import UploadResponse, MediaFileResponse, MediaDelete
from app.domains.media.services import MediaService

__all__ = [
    "ALLOWED_IMAGE_TYPES", "MAX_UPLOAD_BYTES", "DEFAULT_CATEGORY", "FileInfo", "UploadedFile",
    "validate_image", "build_file_name", "parse_file_info",
    "UploadResponse", "MediaFileResponse", "MediaDelete",
    "MediaService"
]
