from __future__ import annotations

from dataclasses import dataclass

import httpx


@dataclass(frozen=True)
class OllamaClientFactory:
    base_url: str

    def create(self) -> httpx.AsyncClient:
        # Deadlines are owned by the invoker; the client itself never times out first.
        return httpx.AsyncClient(base_url=self.base_url, timeout=None)
