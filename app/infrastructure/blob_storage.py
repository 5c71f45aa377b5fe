import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import Settings

logger = logging.getLogger(__name__)

BLOB_API_VERSION = "7"


class BlobStorageError(Exception):
    """Fallo al subir o borrar en Vercel Blob"""


class VercelBlobStore:
    """Cliente de la API REST de Vercel Blob"""

    def __init__(self, token: str, api_url: str = "https://blob.vercel-storage.com", http_client: Optional[httpx.AsyncClient] = None):
        self._token = token
        self._http = http_client or httpx.AsyncClient(
            base_url=api_url.rstrip("/"),
            timeout=httpx.Timeout(30.0),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "VercelBlobStore":
        return cls(token=settings.blob_read_write_token, api_url=settings.blob_api_url)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def put(self, pathname: str, body: bytes, content_type: str) -> str:
        """Sube un archivo público y devuelve su URL"""
        data = await self._request(
            "PUT",
            f"/{pathname}",
            content=body,
            headers={"x-content-type": content_type, "x-add-random-suffix": "0"},
        )
        return data["url"]

    async def delete(self, urls: List[str]) -> None:
        await self._request("POST", "/delete", json={"urls": urls})

    async def list(self, prefix: Optional[str] = None, limit: int = 1000) -> List[Dict[str, Any]]:
        params: Dict[str, Any] = {"limit": limit}
        if prefix:
            params["prefix"] = prefix
        data = await self._request("GET", "/", params=params)
        return data.get("blobs", []) if data else []

    async def _request(self, method: str, path: str, headers: Optional[Dict[str, str]] = None, **kwargs) -> Any:
        # Credenciales en cada petición
        request_headers = {"Authorization": f"Bearer {self._token}", "x-api-version": BLOB_API_VERSION}
        request_headers.update(headers or {})
        try:
            response = await self._http.request(method, path, headers=request_headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error("Error de red con Vercel Blob (%s %s): %s", method, path, e)
            raise BlobStorageError(str(e)) from e

        if response.is_error:
            logger.error("Vercel Blob respondió %s en %s %s", response.status_code, method, path)
            raise BlobStorageError(f"Vercel Blob respondió {response.status_code}")

        if not response.content:
            return None
        return response.json()
