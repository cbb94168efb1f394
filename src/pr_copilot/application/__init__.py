from pr_copilot.application.diff_analysis_service import DiffAnalysisService
from pr_copilot.application.prompt_builder import PromptBuilder
from pr_copilot.application.response_normalizer import (
    ResponseNormalizer,
    extract_touched_files,
    sanitize_model_output,
)

__all__ = [
    "DiffAnalysisService",
    "PromptBuilder",
    "ResponseNormalizer",
    "extract_touched_files",
    "sanitize_model_output",
]
