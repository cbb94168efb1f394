from __future__ import annotations

import structlog

from pr_copilot.application.prompt_builder import PromptBuilder
from pr_copilot.application.response_normalizer import ResponseNormalizer
from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.analysis_result import AnalyzeDiffResponse
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.exceptions.diff_too_large_error import DiffTooLargeError
from pr_copilot.core.exceptions.invocation_error import InvocationError
from pr_copilot.infrastructure.invocation.bounded_invoker import BoundedInvoker
from pr_copilot.infrastructure.observability.redaction_service import redact_text, truncate_for_log
from pr_copilot.infrastructure.providers.provider_registry import ResolvedBackend

logger = structlog.get_logger()


class DiffAnalysisService:
    """Runs one diff through prompt building, the model call and normalization.

    When a fallback backend is configured, a failed primary call is followed by
    exactly one call to the fallback.
    """

    def __init__(
        self,
        prompt_builder: PromptBuilder,
        invoker: BoundedInvoker,
        normalizer: ResponseNormalizer,
        primary: ResolvedBackend,
        timeout_millis: int,
        *,
        fallback: ResolvedBackend | None = None,
        default_language: str = "auto",
        default_style: str = "concise",
        max_diff_chars: int = 200_000,
        log_prompts: bool = False,
    ) -> None:
        self.prompt_builder = prompt_builder
        self.invoker = invoker
        self.normalizer = normalizer
        self.primary = primary
        self.fallback = fallback
        self.timeout_millis = timeout_millis
        self.default_language = default_language
        self.default_style = default_style
        self.max_diff_chars = max_diff_chars
        self.log_prompts = log_prompts

    async def analyze(
        self,
        diff: str,
        language: str | None = None,
        style: str | None = None,
        max_summary_length: int | None = None,
        request_id: str | None = None,
    ) -> AnalyzeDiffResponse:
        if len(diff) > self.max_diff_chars:
            logger.warning("Diff rejected", diff_chars=len(diff), max_diff_chars=self.max_diff_chars)
            raise DiffTooLargeError()

        prompt = self.prompt_builder.build(
            language=_or_default(language, self.default_language),
            style=_or_default(style, self.default_style),
            diff=diff,
            max_summary_length=max_summary_length,
            request_id=request_id,
        )
        if self.log_prompts:
            logger.info(
                "AI prompt built",
                system_prompt=truncate_for_log(redact_text(prompt.system_text)),
                user_prompt=truncate_for_log(redact_text(prompt.user_text)),
            )

        reply = await self._invoke(prompt)
        return self.normalizer.normalize(reply, diff, request_id)

    async def aclose(self) -> None:
        """Close the primary and fallback backends."""
        backends = [self.primary.backend]
        if self.fallback is not None and self.fallback.backend is not self.primary.backend:
            backends.append(self.fallback.backend)
        for backend in backends:
            await backend.aclose()
        logger.info("Backends closed", providers=[b.provider.value for b in backends])

    async def _invoke(self, prompt: AnalysisPrompt) -> ModelReply:
        try:
            return await self.invoker.invoke(prompt, self.primary, self.timeout_millis)
        except InvocationError as primary_error:
            if self.fallback is None:
                raise
            logger.warning(
                "Primary provider failed, switching to fallback",
                provider=self.primary.provider.value,
                fallback_provider=self.fallback.provider.value,
                error_code=primary_error.error_code,
            )
            try:
                return await self.invoker.invoke(prompt, self.fallback, self.timeout_millis)
            except InvocationError as fallback_error:
                raise fallback_error from primary_error


def _or_default(value: str | None, default: str) -> str:
    if value is None or not value.strip():
        return default
    return value
