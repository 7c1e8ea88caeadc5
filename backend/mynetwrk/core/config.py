# backend/mynetwrk/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---- Core ----
    PROJECT_NAME: str = "MyNetwrk API"
    ENV: str = "dev"
    DEBUG: bool = False

    # ---- Database / CORS ----
    # Any SQLAlchemy SYNC url (e.g. sqlite:///./mynetwrk.db, postgresql+psycopg2://...)
    DATABASE_URL: str = "sqlite:///./mynetwrk.db"
    # Comma-separated allowed origins
    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    # ---- Auth ----
    # The OAuth handshake happens upstream; it forwards the resolved identity in these headers.
    AUTH_USER_HEADER: str = "X-User-Id"
    AUTH_NAME_HEADER: str = "X-User-Name"
    AUTH_EMAIL_HEADER: str = "X-User-Email"
    AUTH_IMAGE_HEADER: str = "X-User-Image"

    # ---- AI / OpenAI ----
    OPENAI_API_KEY: str = ""
    AI_MODEL: str = "gpt-4o-mini"
    AI_TIMEOUT: float = 30.0

    # ---- Limits ----
    CONTACT_NOTES_MAX: int = 1500
    INTERACTION_NOTES_MAX: int = 250

    # ---- Startup ----
    SEED_ON_STARTUP: bool = True

    # pydantic-settings v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Convenience: parse CORS list
    @property
    def cors_origins_list(self) -> list[str]:
        cleaned: list[str] = []
        for raw in self.CORS_ORIGINS.replace("\n", ",").split(","):
            v = raw.strip().rstrip("/")
            if v and v not in cleaned:
                cleaned.append(v)
        return cleaned


@lru_cache
def get_settings() -> Settings:
    return Settings()


# singleton (import this everywhere)
settings = get_settings()
