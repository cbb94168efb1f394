from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GenerationParams:
    """Provider-neutral tuning values. Bounds are enforced by the settings layer."""

    temperature: float
    max_tokens: int
    timeout_millis: int
