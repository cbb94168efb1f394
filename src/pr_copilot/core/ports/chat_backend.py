from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TypeVar

from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.domain.provider_options import ProviderOptions
from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.exceptions.configuration_error import ConfigurationError

OptionsT = TypeVar("OptionsT")


class ChatBackend(ABC):
    """Port for one LLM vendor.

    Implementations send a single system + user exchange and map the vendor
    response onto ``ModelReply``. They MUST NOT swallow transport errors: the
    invoker classifies whatever propagates out of ``complete``.
    """

    @property
    @abstractmethod
    def provider(self) -> ProviderType: ...

    @abstractmethod
    async def complete(self, prompt: AnalysisPrompt, options: ProviderOptions) -> ModelReply: ...

    async def aclose(self) -> None:
        """Release the vendor client's connections. No-op for backends without one."""


def expect_options(options: ProviderOptions, expected: type[OptionsT], provider: ProviderType) -> OptionsT:
    """Return *options* narrowed to *expected*, or fail naming both types."""
    if not isinstance(options, expected):
        raise ConfigurationError(
            f"{provider.display_name} backend requires {expected.__name__}, "
            f"got {type(options).__name__}."
        )
    return options
