from __future__ import annotations

from dataclasses import dataclass

from google import genai


@dataclass(frozen=True)
class GeminiClientFactory:
    api_key: str

    def create(self) -> genai.Client:
        return genai.Client(api_key=self.api_key)
