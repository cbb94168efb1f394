"""Ollama backend over its native REST API (``POST /api/chat``)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx
import structlog

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.domain.provider_options import OllamaOptions, ProviderOptions
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.ports.chat_backend import ChatBackend, expect_options

logger = structlog.get_logger()

_CHAT_PATH = "/api/chat"


@dataclass(frozen=True)
class OllamaBackend(ChatBackend):
    client: httpx.AsyncClient
    model: str

    @property
    def provider(self) -> ProviderType:
        return ProviderType.OLLAMA

    async def complete(self, prompt: AnalysisPrompt, options: ProviderOptions) -> ModelReply:
        options = expect_options(options, OllamaOptions, self.provider)
        logger.debug("Ollama request", llm_model=self.model)
        resp = await self.client.post(_CHAT_PATH, json=self._payload(prompt, options))
        resp.raise_for_status()
        return self._to_reply(resp.json())

    async def aclose(self) -> None:
        await self.client.aclose()

    def _payload(self, prompt: AnalysisPrompt, options: OllamaOptions) -> Mapping[str, Any]:
        return {
            "model": self.model,
            "stream": False,
            "messages": [
                {"role": "system", "content": prompt.system_text},
                {"role": "user", "content": prompt.user_text},
            ],
            "options": {"temperature": options.temperature, "num_predict": options.num_predict},
        }

    def _to_reply(self, body: Mapping[str, Any]) -> ModelReply:
        message = body.get("message") or {}
        tokens = (body.get("prompt_eval_count") or 0) + (body.get("eval_count") or 0)
        return ModelReply(
            text=message.get("content"),
            model_name=body.get("model") or self.model,
            total_tokens=tokens,
        )
