import logging
from typing import Any, Dict, List, Optional

import httpx
from fastapi import Request

from app.core.config import Settings
from app.core.security import SESSION_COOKIE, extract_token_from_header, verify_session_token

logger = logging.getLogger(__name__)


class IdentityProviderError(Exception):
    """Fallo al hablar con Clerk"""


class ClerkUserNotFoundError(IdentityProviderError):
    def __init__(self, user_id: str):
        super().__init__(f"Usuario {user_id} no encontrado en Clerk")
        self.user_id = user_id


class ClerkClient:
    """Cliente mínimo de la API REST de Clerk"""

    def __init__(
        self,
        secret_key: str,
        jwt_key: str,
        api_url: str = "https://api.clerk.com/v1",
        authorized_parties: Optional[List[str]] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.jwt_key = jwt_key
        self.authorized_parties = authorized_parties or []
        self._secret_key = secret_key
        self._http = http_client or httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            timeout=httpx.Timeout(10.0),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ClerkClient":
        return cls(
            secret_key=settings.clerk_secret_key,
            jwt_key=settings.clerk_jwt_key,
            api_url=settings.clerk_api_url,
            authorized_parties=settings.clerk_authorized_parties,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    def authenticate_request(self, request: Request) -> Optional[str]:
        """ID del usuario de la sesión, o None si no hay sesión válida"""
        token = extract_token_from_header(request.headers.get("Authorization", ""))
        if not token:
            token = request.cookies.get(SESSION_COOKIE)
        if not token:
            return None

        payload = verify_session_token(token, self.jwt_key, self.authorized_parties)
        return payload["sub"] if payload else None

    async def get_user(self, user_id: str) -> Dict[str, Any]:
        return await self._request("GET", f"/users/{user_id}", user_id=user_id)

    async def list_users(self, limit: int = 100, order_by: str = "-created_at") -> List[Dict[str, Any]]:
        data = await self._request("GET", "/users", params={"limit": limit, "order_by": order_by})
        # La API devuelve una lista o {"data": [...]} según la versión
        if isinstance(data, dict):
            return data.get("data", [])
        return data

    async def update_user_metadata(
        self,
        user_id: str,
        public_metadata: Optional[Dict[str, Any]] = None,
        private_metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {}
        if public_metadata is not None:
            body["public_metadata"] = public_metadata
        if private_metadata is not None:
            body["private_metadata"] = private_metadata
        return await self._request("PATCH", f"/users/{user_id}/metadata", json=body, user_id=user_id)

    async def _request(self, method: str, path: str, user_id: Optional[str] = None, **kwargs) -> Any:
        try:
            response = await self._http.request(
                method, path, headers={"Authorization": f"Bearer {self._secret_key}"}, **kwargs
            )
        except httpx.HTTPError as e:
            logger.error("Error de red con Clerk (%s %s): %s", method, path, e)
            raise IdentityProviderError(str(e)) from e

        if response.status_code == 404 and user_id:
            raise ClerkUserNotFoundError(user_id)
        if response.is_error:
            logger.error("Clerk respondió %s en %s %s", response.status_code, method, path)
            raise IdentityProviderError(f"Clerk respondió {response.status_code}")

        if not response.content:
            return None
        return response.json()
