"""Shared fakes and builders for the test suite."""

import asyncio
from dataclasses import dataclass

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.domain.provider_options import ProviderOptions
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.ports.chat_backend import ChatBackend
from pr_copilot.infrastructure.configuration.ai_settings import AiSettings
from pr_copilot.infrastructure.configuration.analysis_settings import AnalysisSettings
from pr_copilot.infrastructure.configuration.logging_settings import LoggingSettings
from pr_copilot.infrastructure.configuration.main_settings import Settings

VALID_REPLY = (
    '```json\n{"title":"Add logging","summary":"Adds a log line.","details":"main prints on start.",'
    '"risks":[],"suggestedTests":[]}\n```'
)

GO_DIFF = (
    "diff --git a/main.go b/main.go\n"
    "--- a/main.go\n"
    "+++ b/main.go\n"
    "@@ -1,3 +1,4 @@\n"
    " package main\n"
    '+import "log"\n'
)


@dataclass
class FakeBackend(ChatBackend):
    """In-memory backend: returns ``reply``, raises ``error``, or sleeps past the deadline."""

    kind: ProviderType = ProviderType.OPENAI
    reply: ModelReply | None = None
    error: BaseException | None = None
    delay_seconds: float = 0.0
    calls: int = 0
    last_prompt: AnalysisPrompt | None = None
    last_options: ProviderOptions | None = None
    closed: bool = False

    @property
    def provider(self) -> ProviderType:
        return self.kind

    async def complete(self, prompt: AnalysisPrompt, options: ProviderOptions) -> ModelReply:
        self.calls += 1
        self.last_prompt = prompt
        self.last_options = options
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return self.reply or ModelReply(text=VALID_REPLY, model_name="fake-model", total_tokens=42)

    async def aclose(self) -> None:
        self.closed = True


def make_settings(analysis: dict | None = None, logging: dict | None = None, **ai_overrides) -> Settings:
    return Settings(
        _env_file=None,
        ai=AiSettings(_env_file=None, **ai_overrides),
        analysis=AnalysisSettings(_env_file=None, **(analysis or {})),
        logging=LoggingSettings(_env_file=None, **(logging or {})),
    )
