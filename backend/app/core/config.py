# backend/app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    PROJECT_NAME: str = "DataCompare"
    API_V1_STR: str = "/api/v1"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Valores por defecto de las opciones de comparación
    DEFAULT_STRICT_MODE: bool = False
    DEFAULT_IGNORE_EXTRA_PROPERTIES: bool = True
    DEFAULT_MAX_DEPTH: Optional[int] = None
    DEFAULT_MAX_ERRORS: Optional[int] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Crea una instancia única de Settings que se reutiliza.
    El decorador lru_cache asegura que solo se cree una vez.
    """
    return Settings()
