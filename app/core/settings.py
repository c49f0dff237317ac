# app/core/settings.py
from pathlib import Path
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Environment variables and application settings.
    Every value can be overridden from the environment or .env.
    """
    # Store
    DATA_DIR: Path = Path("data")
    STORE_FILENAME: str = "store.json"
    IN_MEMORY_STORE: bool = False

    # App meta
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PORT: int = 3001
    API_PREFIX: str = "/api"
    ALLOWED_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Agent tool server
    MCP_SERVER_NAME: str = "team-dashboard"

    # Split a comma-separated ALLOWED_ORIGINS string from .env
    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @property
    def store_path(self) -> Path:
        return self.DATA_DIR / self.STORE_FILENAME

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

settings = Settings()
