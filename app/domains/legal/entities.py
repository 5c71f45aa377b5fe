from datetime import datetime
from enum import Enum
from typing import List, Optional

from app.domains.common.errors import DomainValidationError
from app.domains.common.ids import new_object_id


class LegalContentType(str, Enum):
    TERMS = "terms"
    PRIVACY = "privacy"


class LegalContent:
    """Texto legal del sitio con su banner opcional"""

    def __init__(
        self,
        type: LegalContentType,
        title: str,
        content: str,
        banner_text: str = "",
        banner_active: bool = False,
        last_updated: Optional[datetime] = None,
        id: Optional[str] = None,
    ):
        try:
            type = LegalContentType(type)
        except ValueError:
            raise DomainValidationError("Tipo de contenido inválido")
        if not title or not content:
            raise DomainValidationError("Título y contenido son requeridos")

        self.id = id or new_object_id()
        self.type = type
        self.title = title
        self.content = content
        self.banner_text = banner_text or ""
        self.banner_active = bool(banner_active)
        self.last_updated = last_updated or datetime.utcnow()

    def __repr__(self) -> str:
        return f"LegalContent(type={self.type.value}, title={self.title})"


def default_legal_contents() -> List[LegalContent]:
    """Textos iniciales cuando la colección está vacía"""
    return [
        LegalContent(
            type=LegalContentType.TERMS,
            title="Términos y Condiciones",
            content=(
                "<h2>Términos y Condiciones de Uso</h2>"
                "<p>Estos términos y condiciones describen las reglas y regulaciones para el uso "
                "del sitio web de ALTUM Legal.</p>"
                "<p>Al acceder a este sitio web asumimos que aceptas estos términos y condiciones. "
                "No continúes usando ALTUM Legal si no aceptas tomar todos los términos y "
                "condiciones establecidos en esta página.</p>"
            ),
        ),
        LegalContent(
            type=LegalContentType.PRIVACY,
            title="Política de Privacidad",
            content=(
                "<h2>Política de Privacidad</h2>"
                "<p>En ALTUM Legal, accesible desde altum-legal.mx, una de nuestras principales "
                "prioridades es la privacidad de nuestros visitantes.</p>"
                "<p>Este documento de Política de Privacidad contiene tipos de información que es "
                "recopilada y registrada por ALTUM Legal y cómo la usamos.</p>"
            ),
        ),
    ]
