from __future__ import annotations

from pr_copilot.core.exceptions.pr_copilot_error import PrCopilotError


class ModelOutputParseError(PrCopilotError):
    """Raised when the model reply is empty, not valid JSON, or misses required fields."""

    status_code = 502

    def __init__(self, message: str = "Error occurred while parsing JSON from the model.") -> None:
        super().__init__(message)
