"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    """Service settings loaded from environment variables.

    Lint rules are deliberately absent: they are fixed in
    ``configlint.linter.models.LintRules``.
    """

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8080, validation_alias=AliasChoices("PORT", "LINTER_SERVER_PORT"))
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Auth: comma-separated list, empty disables auth
    CONFIG_LINTER_API_KEY: str = ""

    # Web UI bundle served at /
    STATIC_DIR: str = "./static"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def api_keys(self) -> frozenset[str]:
        return frozenset(k.strip() for k in self.CONFIG_LINTER_API_KEY.split(",") if k.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()
