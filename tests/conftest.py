import pytest

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_MODEL",
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "OLLAMA_BASE_URL",
    "OLLAMA_MODEL",
    "PRCOPILOT_AI_PROVIDER",
    "PRCOPILOT_AI_FALLBACK_PROVIDER",
    "PRCOPILOT_AI_AUTO_FALLBACK",
    "PRCOPILOT_AI_TEMPERATURE",
    "PRCOPILOT_AI_MAX_TOKENS",
    "PRCOPILOT_AI_TIMEOUT_MILLIS",
    "PRCOPILOT_ANALYSIS_MAX_DIFF_CHARS",
    "PRCOPILOT_ANALYSIS_DEFAULT_LANGUAGE",
    "PRCOPILOT_ANALYSIS_DEFAULT_STYLE",
    "PRCOPILOT_ANALYSIS_INCLUDE_RAW_MODEL_OUTPUT",
    "PRCOPILOT_ANALYSIS_SYSTEM_PROMPT_PATH",
    "PRCOPILOT_LOGGING_LOG_PROMPTS",
    "PRCOPILOT_LOGGING_LOG_RESPONSES",
    "PRCOPILOT_LOGGING_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
