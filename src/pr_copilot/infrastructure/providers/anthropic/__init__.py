from pr_copilot.infrastructure.providers.anthropic.anthropic_backend import AnthropicBackend
from pr_copilot.infrastructure.providers.anthropic.anthropic_client_factory import (
    AnthropicClientFactory,
)

__all__ = ["AnthropicBackend", "AnthropicClientFactory"]
