import re
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from app.domains.common.errors import DomainValidationError

FIRM_EMAIL_DOMAINS = ("altumlegal.mx", "altum-legal.mx")

EMAIL_RE = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{1,14}$")
LINKEDIN_RE = re.compile(r"^https?://(www\.)?linkedin\.com/.*$")

MAX_NOMBRE = 100
MAX_CARGO = 100
MAX_BIOGRAFIA = 2000
MAX_DESCRIPCION_CORTA = 200
MAX_EXPERIENCIA = 60


def _unique(values: Optional[Iterable[str]]) -> List[str]:
    seen = []
    for value in values or []:
        if value and value not in seen:
            seen.append(value)
    return seen


class Attorney:
    """Abogado del despacho. Entidad de valor: update() devuelve una instancia nueva"""

    FIELDS = (
        "id", "slug", "nombre", "cargo", "especializaciones", "servicios_que_atiende",
        "experiencia_anios", "educacion", "idiomas", "correo", "telefono", "biografia",
        "logros", "casos_destacados", "imagen_url", "linked_in", "es_socio",
        "descripcion_corta", "activo", "fecha_creacion", "fecha_actualizacion",
    )

    def __init__(
        self,
        nombre: str,
        cargo: str,
        correo: str,
        telefono: str,
        biografia: str,
        descripcion_corta: str,
        experiencia_anios: int = 0,
        especializaciones: Optional[List[str]] = None,
        servicios_que_atiende: Optional[List[str]] = None,
        educacion: Optional[List[str]] = None,
        idiomas: Optional[List[str]] = None,
        logros: Optional[List[str]] = None,
        casos_destacados: Optional[List[str]] = None,
        imagen_url: Optional[str] = None,
        linked_in: Optional[str] = None,
        es_socio: bool = False,
        activo: bool = True,
        id: Optional[str] = None,
        slug: Optional[str] = None,
        fecha_creacion: Optional[datetime] = None,
        fecha_actualizacion: Optional[datetime] = None,
    ):
        self._validate(nombre, cargo, experiencia_anios, correo, telefono, biografia, descripcion_corta, linked_in)

        self.id = id
        self.slug = slug or None
        self.nombre = nombre.strip()
        self.cargo = cargo.strip()
        self.especializaciones = _unique(especializaciones)
        self.servicios_que_atiende = _unique(servicios_que_atiende)
        self.experiencia_anios = experiencia_anios
        self.educacion = list(educacion or [])
        self.idiomas = list(idiomas or [])
        self.correo = correo.strip().lower()
        self.telefono = telefono.strip()
        self.biografia = biografia
        self.logros = list(logros or [])
        self.casos_destacados = list(casos_destacados or [])
        self.imagen_url = imagen_url or None
        self.linked_in = linked_in or None
        self.es_socio = bool(es_socio)
        self.descripcion_corta = descripcion_corta
        self.activo = bool(activo)
        self.fecha_creacion = fecha_creacion or datetime.utcnow()
        self.fecha_actualizacion = fecha_actualizacion or datetime.utcnow()

    @staticmethod
    def _validate(nombre, cargo, experiencia_anios, correo, telefono, biografia, descripcion_corta, linked_in) -> None:
        if not nombre or not nombre.strip():
            raise DomainValidationError("El nombre es requerido")
        if len(nombre) > MAX_NOMBRE:
            raise DomainValidationError(f"El nombre no puede exceder {MAX_NOMBRE} caracteres")
        if not cargo or not cargo.strip():
            raise DomainValidationError("El cargo es requerido")
        if len(cargo) > MAX_CARGO:
            raise DomainValidationError(f"El cargo no puede exceder {MAX_CARGO} caracteres")
        if experiencia_anios is None or not 0 <= experiencia_anios <= MAX_EXPERIENCIA:
            raise DomainValidationError(f"Los años de experiencia deben estar entre 0 y {MAX_EXPERIENCIA}")
        if not correo or not EMAIL_RE.match(correo.strip()):
            raise DomainValidationError("El correo electrónico no es válido")
        if not Attorney.is_firm_email(correo):
            raise DomainValidationError(
                "El correo debe pertenecer al despacho (" + ", ".join("@" + d for d in FIRM_EMAIL_DOMAINS) + ")"
            )
        if not telefono or not PHONE_RE.match(telefono.strip()):
            raise DomainValidationError("El número de teléfono no es válido")
        if not biografia or len(biografia) > MAX_BIOGRAFIA:
            raise DomainValidationError(
                f"La biografía es requerida y no puede exceder {MAX_BIOGRAFIA} caracteres"
            )
        if not descripcion_corta or len(descripcion_corta) > MAX_DESCRIPCION_CORTA:
            raise DomainValidationError(
                f"La descripción corta es requerida y no puede exceder {MAX_DESCRIPCION_CORTA} caracteres"
            )
        if linked_in and not LINKEDIN_RE.match(linked_in):
            raise DomainValidationError("La URL de LinkedIn no es válida")

    @staticmethod
    def is_firm_email(correo: str) -> bool:
        domain = correo.strip().lower().rsplit("@", 1)[-1]
        return domain in FIRM_EMAIL_DOMAINS

    @classmethod
    def create(cls, **props) -> "Attorney":
        """Alta de un abogado nuevo (sin ID hasta guardarse)"""
        props.pop("id", None)
        props.pop("fecha_creacion", None)
        props.pop("fecha_actualizacion", None)
        return cls(**props)

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.FIELDS}

    def update(self, **changes) -> "Attorney":
        """Actualización parcial: devuelve una instancia nueva y validada"""
        unknown = set(changes) - set(self.FIELDS)
        if unknown:
            raise DomainValidationError(f"Campos desconocidos: {', '.join(sorted(unknown))}")

        props = self.to_dict()
        props.update(changes)
        props["id"] = self.id
        props["fecha_creacion"] = self.fecha_creacion
        props["fecha_actualizacion"] = datetime.utcnow()
        return Attorney(**props)

    def with_slug(self, slug: str) -> "Attorney":
        return self.update(slug=slug)

    def deactivate(self) -> "Attorney":
        return self.update(activo=False)

    def public_info(self) -> Dict[str, Any]:
        """Datos visibles en el sitio (sin estado interno ni fechas)"""
        info = self.to_dict()
        for key in ("activo", "fecha_creacion", "fecha_actualizacion"):
            info.pop(key)
        return info

    def __eq__(self, other) -> bool:
        if not isinstance(other, Attorney):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id) if self.id is not None else id(self)

    def __repr__(self) -> str:
        return f"Attorney(id={self.id}, nombre={self.nombre}, cargo={self.cargo})"
