from __future__ import annotations

import logging
from typing import Any

import requests

from careermentor.config import Settings
from careermentor.errors import UpstreamUnavailable, WebhookNotConfigured

logger = logging.getLogger(__name__)


class WebhookClient:
    """Posts JSON to the AI workflow webhook and hands back the raw body text."""

    def __init__(
        self,
        url: str,
        *,
        timeout_sec: float | None = None,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.timeout_sec = timeout_sec
        self.session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> WebhookClient:
        return cls(settings.n8n_webhook_url, timeout_sec=settings.n8n_timeout_sec)

    @property
    def configured(self) -> bool:
        return bool(self.url)

    def post(self, payload: dict[str, Any]) -> str:
        if not self.configured:
            raise WebhookNotConfigured("N8N_WEBHOOK_URL not configured")

        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout_sec)
        except requests.RequestException as exc:
            logger.error("Webhook request to %s failed: %s", self.url, exc)
            raise UpstreamUnavailable("AI service failed", details=str(exc)) from exc

        if not response.ok:
            logger.error("Webhook returned HTTP %s: %s", response.status_code, response.text)
            raise UpstreamUnavailable(
                "AI service failed",
                details=f"webhook responded {response.status_code} {response.reason}",
            )

        if "charset" not in response.headers.get("content-type", "").lower():
            # Bodies without a declared charset are UTF-8.
            response.encoding = "utf-8"
        return response.text
