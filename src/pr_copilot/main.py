import uvicorn

from pr_copilot.infrastructure.configuration.main_settings import Settings
from pr_copilot.infrastructure.entrypoints.api.app_factory import create_app


def build_app():
    """ASGI factory; settings and provider credentials are read at call time."""
    return create_app(Settings())


def dev():
    """Run the development server."""
    settings = Settings()
    uvicorn.run(
        "pr_copilot.main:build_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.logging.level.lower(),
    )
