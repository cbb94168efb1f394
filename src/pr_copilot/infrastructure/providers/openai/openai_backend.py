from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.domain.provider_options import OpenAiOptions, ProviderOptions
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.ports.chat_backend import ChatBackend, expect_options

logger = structlog.get_logger()


@dataclass(frozen=True)
class OpenAiBackend(ChatBackend):
    client: Any
    model: str

    @property
    def provider(self) -> ProviderType:
        return ProviderType.OPENAI

    async def complete(self, prompt: AnalysisPrompt, options: ProviderOptions) -> ModelReply:
        options = expect_options(options, OpenAiOptions, self.provider)
        logger.debug("OpenAI request", llm_model=self.model)
        resp = await self.client.chat.completions.create(**self._kwargs(prompt, options))
        return self._to_reply(resp)

    async def aclose(self) -> None:
        await self.client.close()

    def _kwargs(self, prompt: AnalysisPrompt, options: OpenAiOptions) -> Mapping[str, Any]:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": prompt.system_text},
                {"role": "user", "content": prompt.user_text},
            ],
            "temperature": options.temperature,
            "max_tokens": options.max_tokens,
        }

    def _to_reply(self, response: Any) -> ModelReply:
        return ModelReply(
            text=self._text(response),
            model_name=getattr(response, "model", None) or self.model,
            total_tokens=self._total_tokens(response),
        )

    def _text(self, response: Any) -> str | None:
        choices = getattr(response, "choices", None) or []
        if not choices:
            return None
        return getattr(choices[0].message, "content", None)

    def _total_tokens(self, response: Any) -> int:
        usage = getattr(response, "usage", None)
        return getattr(usage, "total_tokens", None) or 0
