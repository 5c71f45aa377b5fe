import re
import unicodedata

from app.domains.common.errors import DomainValidationError

_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_SLUG = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def generate_slug(text: str) -> str:
    """'María Vásquez' -> 'maria-vasquez'"""
    if not text or not isinstance(text, str) or not text.strip():
        raise DomainValidationError("El texto del slug no puede estar vacío")

    normalized = unicodedata.normalize("NFD", text.lower())
    without_accents = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    slug = _NON_ALNUM.sub("-", without_accents).strip("-")

    if not slug:
        raise DomainValidationError(f"No se puede generar un slug a partir de '{text}'")
    return slug


def is_slug(value: str) -> bool:
    return bool(value) and bool(_SLUG.match(value))


def unique_slug(slug: str, object_id: str) -> str:
    # En caso de colisión se agregan los últimos 6 caracteres del ID
    return f"{slug}-{object_id[-6:]}"
