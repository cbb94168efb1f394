from pr_copilot.infrastructure.providers.ollama.ollama_backend import OllamaBackend
from pr_copilot.infrastructure.providers.ollama.ollama_client_factory import OllamaClientFactory

__all__ = ["OllamaBackend", "OllamaClientFactory"]
