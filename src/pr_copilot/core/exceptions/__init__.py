from pr_copilot.core.exceptions.configuration_error import ConfigurationError
from pr_copilot.core.exceptions.diff_too_large_error import DiffTooLargeError
from pr_copilot.core.exceptions.invocation_error import InvocationError, InvocationErrorKind
from pr_copilot.core.exceptions.model_output_parse_error import ModelOutputParseError
from pr_copilot.core.exceptions.pr_copilot_error import PrCopilotError
from pr_copilot.core.exceptions.unexpected_analysis_error import UnexpectedAnalysisError

__all__ = [
    "ConfigurationError",
    "DiffTooLargeError",
    "InvocationError",
    "InvocationErrorKind",
    "ModelOutputParseError",
    "PrCopilotError",
    "UnexpectedAnalysisError",
]
