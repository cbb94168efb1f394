from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from prometheus_client import make_asgi_app

from pr_copilot.application.diff_analysis_service import DiffAnalysisService
from pr_copilot.infrastructure.configuration.main_settings import Settings
from pr_copilot.infrastructure.entrypoints.api.analysis_router import router as analysis_router
from pr_copilot.infrastructure.entrypoints.api.error_handlers import register_error_handlers
from pr_copilot.infrastructure.entrypoints.api.health_router import router as health_router
from pr_copilot.infrastructure.observability.logger_factory_service import configure_logging
from pr_copilot.infrastructure.observability.request_context_middleware import (
    RequestContextMiddleware,
)
from pr_copilot.infrastructure.resolution.container import build_diff_analysis_service

logger = structlog.get_logger()


def create_app(settings: Settings, service: DiffAnalysisService | None = None) -> FastAPI:
    configure_logging(settings.logging.level)
    logger.info(
        "Boot diagnostics",
        app_name=settings.app_name,
        provider=settings.ai.provider.value,
        auto_fallback=settings.ai.auto_fallback,
    )

    if service is None:
        service = build_diff_analysis_service(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.analysis_service.aclose()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.analysis_service = service

    register_error_handlers(app)
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router)
    app.include_router(analysis_router, prefix="/api/v1")
    app.mount("/metrics", make_asgi_app())

    return app
