from __future__ import annotations

from dataclasses import dataclass

from anthropic import AsyncAnthropic


@dataclass(frozen=True)
class AnthropicClientFactory:
    api_key: str
    max_retries: int = 0

    def create(self) -> AsyncAnthropic:
        return AsyncAnthropic(api_key=self.api_key, max_retries=self.max_retries)
