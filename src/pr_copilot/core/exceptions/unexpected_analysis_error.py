from __future__ import annotations

from pr_copilot.core.exceptions.pr_copilot_error import PrCopilotError


class UnexpectedAnalysisError(PrCopilotError):
    """Raised when mapping a model reply fails for a reason nobody anticipated."""
