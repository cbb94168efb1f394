from __future__ import annotations

from pr_copilot.core.exceptions.pr_copilot_error import PrCopilotError


class DiffTooLargeError(PrCopilotError):
    status_code = 413

    def __init__(self, message: str = "Diff exceeded maximum allowed size") -> None:
        super().__init__(message)
