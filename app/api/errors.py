import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.repositories.base import RepositoryError
from app.domains.common.errors import DomainValidationError
from app.infrastructure.blob_storage import BlobStorageError
from app.infrastructure.clerk import ClerkUserNotFoundError, IdentityProviderError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def install_error_handlers(app: FastAPI) -> None:
    """Todas las respuestas de error usan el sobre {success, error}"""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = first.get("msg", "Datos inválidos")
        return error_response(
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            f"{field}: {message}" if field else message,
        )

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(PermissionError)
    async def permission_handler(request: Request, exc: PermissionError):
        return error_response(status.HTTP_403_FORBIDDEN, str(exc))

    @app.exception_handler(ClerkUserNotFoundError)
    async def clerk_user_not_found_handler(request: Request, exc: ClerkUserNotFoundError):
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(RepositoryError)
    async def repository_error_handler(request: Request, exc: RepositoryError):
        logger.error("Fallo de base de datos en %s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error interno de base de datos")

    @app.exception_handler(IdentityProviderError)
    async def identity_provider_handler(request: Request, exc: IdentityProviderError):
        logger.error("Fallo del proveedor de identidad en %s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_502_BAD_GATEWAY, "Error al comunicarse con el proveedor de identidad")

    @app.exception_handler(BlobStorageError)
    async def blob_storage_handler(request: Request, exc: BlobStorageError):
        logger.error("Fallo del almacenamiento en %s %s: %s", request.method, request.url.path, exc)
        return error_response(status.HTTP_502_BAD_GATEWAY, "Error al subir el archivo")
