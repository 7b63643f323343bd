from __future__ import annotations

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173,https://career-frontend-with-n8n.vercel.app"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Career Mentor API"
    app_env: str = "development"
    app_host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    store_backend: Literal["supabase", "sql"] = "supabase"
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_table: str = "user_profiles"
    database_url: str = "sqlite:///./data/career_mentor.db"

    n8n_webhook_url: str = ""
    n8n_timeout_sec: float | None = None

    frontend_url: str = ""
    cors_origins: str = DEFAULT_CORS_ORIGINS

    @field_validator("app_env")
    @classmethod
    def validate_env(cls, value: str) -> str:
        allowed = {"development", "staging", "production", "test"}
        if value not in allowed:
            raise ValueError(f"app_env must be one of {sorted(allowed)}")
        return value

    @property
    def cors_origin_list(self) -> list[str]:
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        if self.frontend_url and self.frontend_url not in origins:
            origins.append(self.frontend_url)
        return origins

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_anon_key)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
