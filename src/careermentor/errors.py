"""Error taxonomy shared by the services and the HTTP layer.

Each error carries the status code it maps to; routers decide the body shape.
"""

from __future__ import annotations


class CareerMentorError(Exception):
    status_code: int = 500

    def __init__(self, message: str, *, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class ConfigurationError(CareerMentorError):
    pass


class ValidationError(CareerMentorError):
    status_code = 400


class NotFound(CareerMentorError):
    status_code = 404


class StoreError(CareerMentorError):
    status_code = 500


class UpstreamUnavailable(CareerMentorError):
    status_code = 502


class WebhookNotConfigured(UpstreamUnavailable):
    status_code = 500


class EmptyResponse(UpstreamUnavailable):
    pass


class MissingRoadmap(UpstreamUnavailable):
    pass
