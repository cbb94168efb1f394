"""Provider-specific option sets.

Each backend names the same two knobs differently; the values are carried
over from ``GenerationParams`` untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class OpenAiOptions:
    temperature: float
    max_tokens: int


@dataclass(frozen=True, slots=True)
class AnthropicOptions:
    temperature: float
    max_tokens: int


@dataclass(frozen=True, slots=True)
class GeminiOptions:
    temperature: float
    max_output_tokens: int


@dataclass(frozen=True, slots=True)
class OllamaOptions:
    temperature: float
    num_predict: int


ProviderOptions: TypeAlias = OpenAiOptions | AnthropicOptions | GeminiOptions | OllamaOptions
