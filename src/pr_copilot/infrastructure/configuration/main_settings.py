from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pr_copilot.infrastructure.configuration.ai_settings import AiSettings
from pr_copilot.infrastructure.configuration.analysis_settings import AnalysisSettings
from pr_copilot.infrastructure.configuration.logging_settings import LoggingSettings


class Settings(BaseSettings):
    """
    Combines all settings.
    Each group reads its own env prefix; see the individual settings classes.
    """

    app_name: str = "PR Copilot"
    ai: AiSettings = Field(default_factory=AiSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(env_prefix="PRCOPILOT_", env_file=".env", extra="ignore")
