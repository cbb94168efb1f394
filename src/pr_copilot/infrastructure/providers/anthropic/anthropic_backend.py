from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.domain.provider_options import AnthropicOptions, ProviderOptions
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.ports.chat_backend import ChatBackend, expect_options

logger = structlog.get_logger()


@dataclass(frozen=True)
class AnthropicBackend(ChatBackend):
    client: Any
    model: str

    @property
    def provider(self) -> ProviderType:
        return ProviderType.ANTHROPIC

    async def complete(self, prompt: AnalysisPrompt, options: ProviderOptions) -> ModelReply:
        options = expect_options(options, AnthropicOptions, self.provider)
        logger.debug("Anthropic request", llm_model=self.model)
        resp = await self.client.messages.create(**self._kwargs(prompt, options))
        return self._to_reply(resp)

    async def aclose(self) -> None:
        await self.client.close()

    def _kwargs(self, prompt: AnalysisPrompt, options: AnthropicOptions) -> Mapping[str, Any]:
        return {
            "model": self.model,
            "system": prompt.system_text,
            "messages": [{"role": "user", "content": prompt.user_text}],
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
        parts = [getattr(b, "text", None) for b in getattr(response, "content", None) or []]
        parts = [p for p in parts if p]
        return "".join(parts) if parts else None

    def _total_tokens(self, response: Any) -> int:
        u = getattr(response, "usage", None)
        if u is None:
            return 0
        return (getattr(u, "input_tokens", None) or 0) + (getattr(u, "output_tokens", None) or 0)
