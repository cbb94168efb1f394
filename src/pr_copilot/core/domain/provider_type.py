from enum import StrEnum, auto


class ProviderType(StrEnum):
    """Supported LLM backends. Values are the lowercase provider identifiers."""

    OPENAI = auto()
    ANTHROPIC = auto()
    GEMINI = auto()
    OLLAMA = auto()

    @classmethod
    def from_value(cls, value: str) -> "ProviderType":
        """Parse a provider identifier case-insensitively."""
        for provider in cls:
            if provider.value == value.strip().lower():
                return provider
        raise ValueError(f"Unknown AI provider: {value}.")

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


DISPLAY_NAMES: dict[ProviderType, str] = {
    ProviderType.OPENAI: "OpenAI",
    ProviderType.ANTHROPIC: "Anthropic",
    ProviderType.GEMINI: "Gemini",
    ProviderType.OLLAMA: "Ollama",
}
