from pr_copilot.core.domain.analysis_prompt import AnalysisPrompt
from pr_copilot.core.domain.analysis_result import (
    AiCallMetadata,
    AnalyzeDiffResponse,
    ModelAnalysisResult,
)
from pr_copilot.core.domain.generation_params import GenerationParams
from pr_copilot.core.domain.model_reply import ModelReply
from pr_copilot.core.domain.provider_options import (
    AnthropicOptions,
    GeminiOptions,
    OllamaOptions,
    OpenAiOptions,
    ProviderOptions,
)
from pr_copilot.core.domain.provider_type import ProviderType

__all__ = [
    "AiCallMetadata",
    "AnalysisPrompt",
    "AnalyzeDiffResponse",
    "AnthropicOptions",
    "GeminiOptions",
    "GenerationParams",
    "ModelAnalysisResult",
    "ModelReply",
    "OllamaOptions",
    "OpenAiOptions",
    "ProviderOptions",
    "ProviderType",
]
