from __future__ import annotations

from collections.abc import Collection

import structlog

from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.ports.chat_backend import ChatBackend
from pr_copilot.infrastructure.configuration.ai_settings import AiSettings
from pr_copilot.infrastructure.providers.anthropic import AnthropicBackend, AnthropicClientFactory
from pr_copilot.infrastructure.providers.gemini import GeminiBackend, GeminiClientFactory
from pr_copilot.infrastructure.providers.ollama import OllamaBackend, OllamaClientFactory
from pr_copilot.infrastructure.providers.openai import OpenAiBackend, OpenAiClientFactory

logger = structlog.get_logger()


class BackendFactory:
    """Builds a backend for every provider whose credentials or endpoint are configured.

    *providers* limits construction to the providers the caller will resolve, so
    no client is opened that nothing will use or close.
    """

    @staticmethod
    def build_backends(
        settings: AiSettings, providers: Collection[ProviderType] | None = None
    ) -> dict[ProviderType, ChatBackend]:
        wanted = set(ProviderType) if providers is None else set(providers)
        logger.info(
            "LLM provider configuration check",
            openai=settings.openai_api_key is not None,
            anthropic=settings.anthropic_api_key is not None,
            gemini=settings.gemini_api_key is not None,
            ollama=bool(settings.ollama_model),
        )
        backends: dict[ProviderType, ChatBackend] = {}

        if ProviderType.OPENAI in wanted and settings.openai_api_key:
            client = OpenAiClientFactory(settings.openai_api_key.get_secret_value()).create()
            backends[ProviderType.OPENAI] = OpenAiBackend(client=client, model=settings.openai_model)

        if ProviderType.ANTHROPIC in wanted and settings.anthropic_api_key:
            client = AnthropicClientFactory(settings.anthropic_api_key.get_secret_value()).create()
            backends[ProviderType.ANTHROPIC] = AnthropicBackend(client=client, model=settings.anthropic_model)

        if ProviderType.GEMINI in wanted and settings.gemini_api_key:
            client = GeminiClientFactory(settings.gemini_api_key.get_secret_value()).create()
            backends[ProviderType.GEMINI] = GeminiBackend(client=client, model=settings.gemini_model)

        if ProviderType.OLLAMA in wanted and settings.ollama_model:
            client = OllamaClientFactory(settings.ollama_base_url).create()
            backends[ProviderType.OLLAMA] = OllamaBackend(client=client, model=settings.ollama_model)

        return backends
