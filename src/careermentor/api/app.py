from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from careermentor.api.routes import router as api_router
from careermentor.config import Settings, get_settings
from careermentor.core.webhook import WebhookClient
from careermentor.db.init import build_store
from careermentor.db.store import ProfileStore
from careermentor.errors import CareerMentorError
from careermentor.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    store: ProfileStore | None = None,
    webhook: WebhookClient | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)
    # Fails fast when the configured store has no credentials.
    app.state.store = store if store is not None else build_store(settings)
    app.state.webhook = webhook if webhook is not None else WebhookClient.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health() -> JSONResponse:
        return JSONResponse({"status": "ok", "message": f"{settings.app_name} is running"})

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        error = "Route not found" if exc.status_code == 404 else str(exc.detail)
        return JSONResponse({"error": error}, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg', '')}"
            for err in exc.errors()
        )
        return JSONResponse({"error": "Invalid request body", "details": details}, status_code=400)

    @app.exception_handler(CareerMentorError)
    async def _domain_error(request: Request, exc: CareerMentorError) -> JSONResponse:
        logger.error("Unhandled %s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Error on %s", request.url.path)
        return JSONResponse({"error": "Something went wrong!"}, status_code=500)

    app.include_router(api_router)
    return app
