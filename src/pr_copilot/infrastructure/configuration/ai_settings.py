from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pr_copilot.core.domain.generation_params import GenerationParams
from pr_copilot.core.domain.provider_type import ProviderType


class AiSettings(BaseSettings):
    """Provider selection, shared generation parameters and vendor credentials."""

    provider: ProviderType = ProviderType.OPENAI
    fallback_provider: ProviderType | None = None
    auto_fallback: bool = False
    temperature: float = Field(default=0.2, ge=0.0, le=1.0)
    max_tokens: int = Field(default=2048, ge=1)
    timeout_millis: int = Field(default=60_000, ge=1000)

    openai_api_key: SecretStr | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o-mini", alias="OPENAI_MODEL")
    anthropic_api_key: SecretStr | None = Field(default=None, alias="ANTHROPIC_API_KEY")
    anthropic_model: str = Field(default="claude-sonnet-4-20250514", alias="ANTHROPIC_MODEL")
    gemini_api_key: SecretStr | None = Field(default=None, alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-2.0-flash", alias="GEMINI_MODEL")
    ollama_base_url: str = Field(default="http://localhost:11434", alias="OLLAMA_BASE_URL")
    ollama_model: str | None = Field(default=None, alias="OLLAMA_MODEL")

    model_config = SettingsConfigDict(
        env_prefix="PRCOPILOT_AI_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("provider", "fallback_provider", mode="before")
    @classmethod
    def parse_provider(cls, value: object) -> object:
        """Accept provider names in any case, and treat an empty string as unset."""
        if isinstance(value, str):
            if not value.strip():
                return None
            return ProviderType.from_value(value)
        return value

    @property
    def generation_params(self) -> GenerationParams:
        return GenerationParams(
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            timeout_millis=self.timeout_millis,
        )
