from __future__ import annotations

from pr_copilot.core.exceptions.pr_copilot_error import PrCopilotError


class ConfigurationError(PrCopilotError):
    """Raised when configuration is invalid or incomplete."""
