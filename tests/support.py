from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.db import Database
from app.core.security import extract_token_from_header
from app.infrastructure.clerk import ClerkUserNotFoundError

TEST_DATABASE_URL = "sqlite+aiosqlite://"


class FakeIdentityProvider:
    """Clerk en memoria: el token Bearer es directamente el ID del usuario"""

    def __init__(self):
        self.users: Dict[str, Dict[str, Any]] = {}
        self.private_metadata: Dict[str, Dict[str, Any]] = {}
        self.broken = False

    def add_user(self, user_id: str, role: Optional[str] = "user", first_name: str = "", last_name: str = "",
                 department: Optional[str] = None) -> Dict[str, Any]:
        self.users[user_id] = {
            "id": user_id,
            "email_addresses": [{"email_address": f"{user_id}@altumlegal.mx"}],
            "first_name": first_name,
            "last_name": last_name,
            "image_url": None,
            "public_metadata": {"role": role, "department": department},
            "created_at": 1700000000000 + len(self.users),
            "last_sign_in_at": None,
        }
        return self.users[user_id]

    def authenticate_request(self, request) -> Optional[str]:
        return extract_token_from_header(request.headers.get("Authorization", ""))

    async def get_user(self, user_id: str) -> Dict[str, Any]:
        if self.broken:
            raise RuntimeError("Clerk no disponible")
        if user_id not in self.users:
            raise ClerkUserNotFoundError(user_id)
        return self.users[user_id]

    async def list_users(self, limit: int = 100, order_by: str = "-created_at") -> List[Dict[str, Any]]:
        users = sorted(self.users.values(), key=lambda u: u["created_at"], reverse=True)
        return users[:limit]

    async def update_user_metadata(self, user_id: str, public_metadata=None, private_metadata=None):
        user = self.users[user_id]
        if public_metadata is not None:
            user["public_metadata"] = dict(public_metadata)
        if private_metadata is not None:
            self.private_metadata[user_id] = dict(private_metadata)
        return user

    async def aclose(self) -> None:
        pass


class FakeBlobStore:
    """Almacenamiento de blobs en memoria"""

    def __init__(self):
        self.blobs: Dict[str, Dict[str, Any]] = {}

    async def put(self, pathname: str, body: bytes, content_type: str) -> str:
        url = f"https://blob.test/{pathname}"
        self.blobs[url] = {"url": url, "pathname": pathname, "size": len(body), "contentType": content_type}
        return url

    async def list(self, prefix: Optional[str] = None, limit: int = 1000) -> List[Dict[str, Any]]:
        return [b for b in self.blobs.values() if not prefix or b["pathname"].startswith(prefix)][:limit]

    async def delete(self, urls: List[str]) -> None:
        for url in urls:
            self.blobs.pop(url, None)

    async def aclose(self) -> None:
        pass


def memory_database() -> Database:
    # Una sola conexión compartida para que la base en memoria sobreviva entre sesiones
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    return Database(TEST_DATABASE_URL, engine=engine)


def auth(user_id: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {user_id}"}


def attorney_payload(**overrides) -> Dict[str, Any]:
    payload = {
        "nombre": "María Vásquez",
        "cargo": "Socia Directora",
        "especializaciones": ["Derecho Corporativo", "Fusiones"],
        "serviciosQueAtiende": [],
        "experienciaAnios": 15,
        "educacion": ["UNAM"],
        "idiomas": ["Español", "Inglés"],
        "correo": "maria.vasquez@altumlegal.mx",
        "telefono": "+525512345678",
        "biografia": "Abogada especialista en derecho corporativo.",
        "esSocio": True,
        "descripcionCorta": "Socia fundadora",
    }
    payload.update(overrides)
    return payload


