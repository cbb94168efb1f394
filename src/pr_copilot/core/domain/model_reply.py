from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ModelReply:
    """One backend answer. ``text`` is None when the vendor response carried no text."""

    text: str | None
    model_name: str
    total_tokens: int = 0
    latency_ms: int = 0
