from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Controls whether prompts and parsed responses are written to the log."""

    log_prompts: bool = False
    log_responses: bool = False
    level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PRCOPILOT_LOGGING_",
        env_file=".env",
        extra="ignore",
    )
