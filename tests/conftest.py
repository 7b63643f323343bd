from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from careermentor.api.app import create_app
from careermentor.config import Settings
from careermentor.db.init import init_database
from careermentor.db.store import SqlProfileStore
from careermentor.errors import UpstreamUnavailable, WebhookNotConfigured


class FakeWebhook:
    def __init__(self, body: str = "", *, url: str = "http://n8n.test/webhook/career", error: Exception | None = None):
        self.url = url
        self.body = body
        self.error = error
        self.calls: list[dict[str, Any]] = []

    @property
    def configured(self) -> bool:
        return bool(self.url)

    def post(self, payload: dict[str, Any]) -> str:
        if not self.configured:
            raise WebhookNotConfigured("N8N_WEBHOOK_URL not configured")
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return self.body

    def fail(self) -> None:
        self.error = UpstreamUnavailable("AI service failed", details="webhook responded 500")


@pytest.fixture
def settings() -> Settings:
    return Settings(app_env="test", store_backend="sql", database_url="sqlite://", n8n_webhook_url="")


@pytest.fixture
def store() -> SqlProfileStore:
    return init_database("sqlite://")


@pytest.fixture
def webhook() -> FakeWebhook:
    return FakeWebhook()


@pytest.fixture
def client(settings: Settings, store: SqlProfileStore, webhook: FakeWebhook) -> TestClient:
    return TestClient(create_app(settings, store=store, webhook=webhook))


@pytest.fixture
def student() -> dict[str, Any]:
    return {
        "email": "asha@example.com",
        "branch": "CSE",
        "year": 2,
        "interest": "Web Dev",
        "daily_time": 45,
    }
