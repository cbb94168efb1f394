from pr_copilot.infrastructure.providers.backend_factory import BackendFactory
from pr_copilot.infrastructure.providers.provider_registry import (
    ProviderRegistry,
    ResolvedBackend,
    build_options,
)

__all__ = ["BackendFactory", "ProviderRegistry", "ResolvedBackend", "build_options"]
