from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalysisSettings(BaseSettings):
    max_diff_chars: int = Field(default=200_000, ge=1)
    default_language: str = Field(default="auto", min_length=1)
    default_style: str = Field(default="concise", min_length=1)
    include_raw_model_output: bool = False
    system_prompt_path: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="PRCOPILOT_ANALYSIS_",
        env_file=".env",
        extra="ignore",
        str_strip_whitespace=True,
    )
