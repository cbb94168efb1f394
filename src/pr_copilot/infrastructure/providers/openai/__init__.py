from pr_copilot.infrastructure.providers.openai.openai_backend import OpenAiBackend
from pr_copilot.infrastructure.providers.openai.openai_client_factory import OpenAiClientFactory

__all__ = ["OpenAiBackend", "OpenAiClientFactory"]
