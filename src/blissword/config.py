"""
Configuration management using Pydantic Settings.

Every field can be set from the environment with a BLISSWORD_ prefix, e.g.
BLISSWORD_REDIS_DB=15, or from a .env file in the working directory.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BLISSARY_ID_MAP_URL = (
    "https://raw.githubusercontent.com/hlridge/Bliss-Blissary-BCI-ID-Map/main/"
    "blissary_to_bci_mapping.json"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BLISSWORD_",
        env_file=".env",
        extra="ignore",
    )

    # Tables: a local path wins over a URL
    dictionary_path: str | None = Field(default=None, description="Symbol dictionary JSON file")
    dictionary_url: str | None = Field(default=None, description="Symbol dictionary JSON URL")
    id_map_path: str | None = Field(default=None, description="Blissary id map JSON file")
    id_map_url: str | None = Field(default=BLISSARY_ID_MAP_URL, description="Blissary id map JSON URL")
    fetch_timeout: float = Field(default=60, gt=0)

    # Buffer storage
    redis_host: str = "localhost"
    redis_port: int = Field(default=6379, ge=1, le=65535)
    redis_db: int = 0
    buffer_prefix: str = "blissword"

    # API
    api_url: str = "http://localhost:8000/api"
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Allowed CORS origins (comma-separated)",
    )

    # Indicator gloss inflection: "suffix" or "openai"
    inflector: str = "suffix"
    openai_model: str = "gpt-4o-mini"

    log_level: str = "INFO"

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
