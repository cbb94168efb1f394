from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.core.exceptions.pr_copilot_error import PrCopilotError


class InvocationErrorKind(StrEnum):
    TIMEOUT = auto()
    ADDRESS_UNRESOLVED = auto()
    RESOURCE_ACCESS_FAILURE = auto()
    UNEXPECTED = auto()


@dataclass(eq=False)
class InvocationError(PrCopilotError):
    """A backend call that did not produce a reply.

    ``status_code`` is 504 for timeouts, 502 for network failures (504 when a
    network failure was itself caused by a socket timeout) and 500 otherwise.
    """

    kind: InvocationErrorKind
    provider: ProviderType
    message: str
    status_code: int = 500

    def __post_init__(self) -> None:
        super().__init__(self.message)

    @property
    def error_code(self) -> str:
        return f"InvocationError.{self.kind.name}"

    def __str__(self) -> str:
        return f"{self.provider.value}: {self.message}"
