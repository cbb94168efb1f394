from pr_copilot.infrastructure.configuration.ai_settings import AiSettings
from pr_copilot.infrastructure.configuration.analysis_settings import AnalysisSettings
from pr_copilot.infrastructure.configuration.logging_settings import LoggingSettings
from pr_copilot.infrastructure.configuration.main_settings import Settings

__all__ = ["AiSettings", "AnalysisSettings", "LoggingSettings", "Settings"]
