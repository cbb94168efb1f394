"""Lookup of backend handles and provider-specific options.

The registry is built once at startup from the backends that could actually be
constructed, and is read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import assert_never

import structlog

from pr_copilot.core.domain.generation_params import GenerationParams
from pr_copilot.core.domain.provider_options import (
    AnthropicOptions,
    GeminiOptions,
    OllamaOptions,
    OpenAiOptions,
    ProviderOptions,
)
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.exceptions.configuration_error import ConfigurationError
from pr_copilot.core.ports.chat_backend import ChatBackend

logger = structlog.get_logger()

FALLBACK_PROVIDER_VARIABLE = "PRCOPILOT_AI_FALLBACK_PROVIDER"


@dataclass(frozen=True, slots=True)
class ResolvedBackend:
    provider: ProviderType
    backend: ChatBackend
    options: ProviderOptions


def build_options(provider: ProviderType, params: GenerationParams) -> ProviderOptions:
    match provider:
        case ProviderType.OPENAI:
            return OpenAiOptions(temperature=params.temperature, max_tokens=params.max_tokens)
        case ProviderType.ANTHROPIC:
            return AnthropicOptions(temperature=params.temperature, max_tokens=params.max_tokens)
        case ProviderType.GEMINI:
            return GeminiOptions(temperature=params.temperature, max_output_tokens=params.max_tokens)
        case ProviderType.OLLAMA:
            return OllamaOptions(temperature=params.temperature, num_predict=params.max_tokens)
        case _:
            assert_never(provider)


def setup_hint(provider: ProviderType) -> str:
    match provider:
        case ProviderType.OPENAI:
            return "Set OPENAI_API_KEY."
        case ProviderType.ANTHROPIC:
            return "Set ANTHROPIC_API_KEY."
        case ProviderType.GEMINI:
            return "Set GEMINI_API_KEY."
        case ProviderType.OLLAMA:
            return "Set OLLAMA_MODEL and ensure Ollama is running."
        case _:
            assert_never(provider)


class ProviderRegistry:
    def __init__(self, backends: Mapping[ProviderType, ChatBackend], params: GenerationParams) -> None:
        self._backends = MappingProxyType(dict(backends))
        self.params = params
        logger.info("Provider registry initialized", providers=sorted(p.value for p in self.available))

    @property
    def available(self) -> frozenset[ProviderType]:
        return frozenset(self._backends)

    def build_options(self, provider: ProviderType) -> ProviderOptions:
        return build_options(provider, self.params)

    def resolve(self, provider: ProviderType) -> ResolvedBackend:
        """Pair the provider's backend with its options, or fail naming the missing setup."""
        backend = self._backends.get(provider)
        if backend is None:
            raise ConfigurationError(
                f"{provider.display_name} provider is selected but not configured. "
                f"{setup_hint(provider)} Check .env.example for more details."
            )
        return ResolvedBackend(provider=provider, backend=backend, options=self.build_options(provider))

    def resolve_fallback(
        self, fallback_provider: ProviderType | None, auto_fallback: bool
    ) -> ResolvedBackend | None:
        if not auto_fallback:
            return None
        if fallback_provider is None:
            raise ConfigurationError(
                "Auto-fallback is enabled but no fallback provider is configured. "
                f"Please set {FALLBACK_PROVIDER_VARIABLE} or disable auto-fallback."
            )
        return self.resolve(fallback_provider)
