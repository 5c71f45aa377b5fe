from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./altum.db"
    database_echo: bool = False

    # Clerk
    clerk_secret_key: str = ""
    clerk_jwt_key: str = ""  # PEM público para verificar tokens de sesión
    clerk_api_url: str = "https://api.clerk.com/v1"
    clerk_authorized_parties: List[str] = []

    # Vercel Blob
    blob_read_write_token: str = ""
    blob_api_url: str = "https://blob.vercel-storage.com"

    upload_max_bytes: int = 10 * 1024 * 1024

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
