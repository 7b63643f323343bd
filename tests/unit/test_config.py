import pytest
from pydantic import ValidationError

from careermentor.api.app import create_app
from careermentor.config import Settings
from careermentor.errors import ConfigurationError


def test_defaults(monkeypatch) -> None:
    for name in ("PORT", "STORE_BACKEND", "CORS_ORIGINS", "FRONTEND_URL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.port == 5000
    assert settings.store_backend == "supabase"
    assert "http://localhost:5173" in settings.cors_origin_list


def test_port_and_frontend_url_from_environment(monkeypatch) -> None:
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("FRONTEND_URL", "https://mentor.example.com")
    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.cors_origin_list[-1] == "https://mentor.example.com"


def test_invalid_app_env_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(app_env="qa")


def test_supabase_backend_without_credentials_fails_fast() -> None:
    settings = Settings(_env_file=None, store_backend="supabase", supabase_url="", supabase_anon_key="")

    with pytest.raises(ConfigurationError, match="SUPABASE_URL"):
        create_app(settings)
