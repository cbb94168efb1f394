from pr_copilot.infrastructure.resolution.container import (
    build_diff_analysis_service,
    build_provider_registry,
)

__all__ = ["build_diff_analysis_service", "build_provider_registry"]
