from uuid import UUID

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_file_encoding="utf-8")
    APP_NAME: str = "Sec Upload"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = True
    # Namespace of every UUID handed out for uploaded files. Changing it
    # invalidates all previously issued identifiers.
    UPLOAD_NAMESPACE: UUID = UUID("c7bb890c-a4a8-4d68-85b7-1e1cfe909249")
    URL_PREFIX: str = "sec.upload"
    CHECK_EXTENSION: bool = True
    # Largest file the validators will open, uploads included
    MAX_FILE_SIZE_MB: float = 10.0
    # Comma-separated top level domains (e.g. ".com,.ch"). Empty = any well-formed TLD.
    TLD_WHITELIST: str = ""
    # CORS: comma-separated list of allowed origins. Empty = same-origin only.
    CORS_ORIGINS: str = ""

    @property
    def tld_whitelist_list(self) -> list[str] | None:
        tlds = [t.strip() for t in self.TLD_WHITELIST.split(",") if t.strip()]
        return tlds or None


settings = Settings()
