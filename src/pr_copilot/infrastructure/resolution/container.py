"""Functional DI container: builds the fully-wired diff analysis service.

Provider resolution happens here, at startup, so a missing key fails the boot
instead of the first request.
"""

from __future__ import annotations

import structlog

from pr_copilot.application.diff_analysis_service import DiffAnalysisService
from pr_copilot.application.prompt_builder import PromptBuilder
from pr_copilot.application.response_normalizer import ResponseNormalizer
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.ports.chat_backend import ChatBackend
from pr_copilot.infrastructure.configuration.main_settings import Settings
from pr_copilot.infrastructure.invocation.bounded_invoker import BoundedInvoker
from pr_copilot.infrastructure.providers.backend_factory import BackendFactory
from pr_copilot.infrastructure.providers.provider_registry import ProviderRegistry

logger = structlog.get_logger()


def build_provider_registry(
    settings: Settings, backends: dict[ProviderType, ChatBackend] | None = None
) -> ProviderRegistry:
    if backends is None:
        backends = BackendFactory.build_backends(settings.ai, _providers_in_use(settings))
    return ProviderRegistry(backends, settings.ai.generation_params)


def build_diff_analysis_service(
    settings: Settings, backends: dict[ProviderType, ChatBackend] | None = None
) -> DiffAnalysisService:
    """Wire the service for *settings*.

    *backends* replaces the vendor clients built from credentials; tests pass fakes here.

    Raises:
        ConfigurationError: the primary or fallback provider is not configured,
            or the system prompt cannot be loaded.
    """
    ai = settings.ai
    registry = build_provider_registry(settings, backends)
    primary = registry.resolve(ai.provider)
    fallback = registry.resolve_fallback(ai.fallback_provider, ai.auto_fallback)

    logger.info(
        "Diff analysis service wired",
        provider=primary.provider.value,
        fallback_provider=fallback.provider.value if fallback else None,
        timeout_ms=ai.timeout_millis,
    )
    return DiffAnalysisService(
        prompt_builder=PromptBuilder(settings.analysis.system_prompt_path),
        invoker=BoundedInvoker(),
        normalizer=ResponseNormalizer(
            include_raw_model_output=settings.analysis.include_raw_model_output,
            log_responses=settings.logging.log_responses,
        ),
        primary=primary,
        timeout_millis=ai.timeout_millis,
        fallback=fallback,
        default_language=settings.analysis.default_language,
        default_style=settings.analysis.default_style,
        max_diff_chars=settings.analysis.max_diff_chars,
        log_prompts=settings.logging.log_prompts,
    )


def _providers_in_use(settings: Settings) -> set[ProviderType]:
    ai = settings.ai
    providers = {ai.provider}
    if ai.auto_fallback and ai.fallback_provider is not None:
        providers.add(ai.fallback_provider)
    return providers
