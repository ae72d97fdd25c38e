# study_bot/core/config.py
import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

REQUIRED_AT_STARTUP = (
    "GEMINI_API_KEY",
    "VITE_APP_ID",
    "JWT_SECRET",
    "DATABASE_URL",
    "OAUTH_SERVER_URL",
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # LLM (OpenAI-compatible chat completions)
    GEMINI_API_KEY: str = ""
    LLM_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta/openai"
    LLM_MODEL: str = "gemini-2.0-flash"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 2048
    LLM_TIMEOUT_SECONDS: float = 30.0

    # Auth
    VITE_APP_ID: str = ""
    JWT_SECRET: str = ""
    OAUTH_SERVER_URL: str = "https://api.manus.im"
    OWNER_OPEN_ID: str = ""

    # Database, empty means degraded mode (no user persistence)
    DATABASE_URL: str = ""

    # Owner notifications
    BUILT_IN_FORGE_API_URL: str = ""
    BUILT_IN_FORGE_API_KEY: str = ""

    # API
    API_V1_PREFIX: str = "/api/v1"
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    LOG_LEVEL: str = "INFO"

    def missing_settings(self) -> list[str]:
        """Names of startup settings that are unset or blank."""
        return [name for name in REQUIRED_AT_STARTUP if not str(getattr(self, name)).strip()]

    def warn_missing(self) -> list[str]:
        missing = self.missing_settings()
        for name in missing:
            logger.warning(f"{name} is not configured, related features will be unavailable")
        return missing


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
