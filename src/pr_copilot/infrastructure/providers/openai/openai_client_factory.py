from __future__ import annotations

from dataclasses import dataclass

from openai import AsyncOpenAI


@dataclass(frozen=True)
class OpenAiClientFactory:
    api_key: str
    max_retries: int = 0

    def create(self) -> AsyncOpenAI:
        return AsyncOpenAI(api_key=self.api_key, max_retries=self.max_retries)
