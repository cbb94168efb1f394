from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog
from google.genai import types

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.domain.provider_options import GeminiOptions, ProviderOptions
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.ports.chat_backend import ChatBackend, expect_options

logger = structlog.get_logger()


@dataclass(frozen=True)
class GeminiBackend(ChatBackend):
    client: Any
    model: str

    @property
    def provider(self) -> ProviderType:
        return ProviderType.GEMINI

    async def complete(self, prompt: AnalysisPrompt, options: ProviderOptions) -> ModelReply:
        options = expect_options(options, GeminiOptions, self.provider)
        logger.debug("Gemini request", llm_model=self.model)
        resp = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt.user_text,
            config=self._config(prompt, options),
        )
        return self._to_reply(resp)

    async def aclose(self) -> None:
        # aclose is absent on google-genai releases before the async close API.
        aclose = getattr(self.client.aio, "aclose", None)
        if aclose is not None:
            await aclose()

    def _config(self, prompt: AnalysisPrompt, options: GeminiOptions) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=prompt.system_text,
            temperature=options.temperature,
            max_output_tokens=options.max_output_tokens,
        )

    def _to_reply(self, response: Any) -> ModelReply:
        return ModelReply(
            text=self._text(response),
            model_name=getattr(response, "model_version", None) or self.model,
            total_tokens=self._total_tokens(response),
        )

    def _text(self, response: Any) -> str | None:
        text = getattr(response, "text", None)
        return text if isinstance(text, str) else None

    def _total_tokens(self, response: Any) -> int:
        meta = getattr(response, "usage_metadata", None)
        return getattr(meta, "total_token_count", None) or 0
