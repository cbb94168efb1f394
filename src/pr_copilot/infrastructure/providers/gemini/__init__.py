from pr_copilot.infrastructure.providers.gemini.gemini_backend import GeminiBackend
from pr_copilot.infrastructure.providers.gemini.gemini_client_factory import GeminiClientFactory

__all__ = ["GeminiBackend", "GeminiClientFactory"]
