import random
import re
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from app.domains.common.errors import DomainValidationError

ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/jpg", "image/png", "image/webp", "image/gif")
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
DEFAULT_CATEGORY = "attorneys"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.-]")
_CATEGORY = re.compile(r"^[a-z0-9_]+$")


def validate_image(content_type: Optional[str], size: int, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Tipo y tamaño permitidos para imágenes subidas"""
    if content_type not in ALLOWED_IMAGE_TYPES:
        raise DomainValidationError("Tipo de archivo no válido. Solo se permiten imágenes (JPEG, PNG, WebP, GIF)")
    if size > max_bytes:
        raise DomainValidationError(f"El archivo es demasiado grande. Máximo {max_bytes // (1024 * 1024)}MB")


def validate_category(category: str) -> None:
    """La categoría forma parte de la ruta y del nombre: sin guiones ni barras"""
    if not _CATEGORY.match(category):
        raise DomainValidationError("Categoría no válida. Usa minúsculas, dígitos o guion bajo")


def sanitize_filename(name: str) -> str:
    return _UNSAFE_CHARS.sub("_", name)


def build_file_name(category: str, original_name: str, timestamp_ms: Optional[int] = None, suffix: Optional[int] = None) -> str:
    """{categoria}-{timestamp_ms}-{aleatorio}-{nombre original saneado}"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if suffix is None:
        suffix = random.randint(0, 10 ** 9)
    return f"{category}-{timestamp_ms}-{suffix}-{sanitize_filename(original_name)}"


def blob_path(category: str, file_name: str) -> str:
    return f"uploads/{category}/{file_name}"


@dataclass
class FileInfo:
    url: str
    file_name: str
    original_name: Optional[str] = None
    category: Optional[str] = None
    uploaded_at: Optional[datetime] = None


def parse_file_info(url: str) -> FileInfo:
    """Recupera categoría, fecha y nombre original a partir de la URL"""
    file_name = url.rstrip("/").split("/")[-1]
    parts = file_name.split("-")
    if len(parts) < 4 or not parts[1].isdigit():
        return FileInfo(url=url, file_name=file_name)

    return FileInfo(
        url=url,
        file_name=file_name,
        original_name="-".join(parts[3:]),
        category=parts[0],
        uploaded_at=datetime.fromtimestamp(int(parts[1]) / 1000, tz=timezone.utc),
    )


@dataclass
class UploadedFile:
    url: str
    file_name: str
    original_name: str
    size: int
    type: str
    category: str
