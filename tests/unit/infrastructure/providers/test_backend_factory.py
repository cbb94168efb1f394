from pr_copilot.core.domain.provider_type import ProviderType
from pr_copilot.infrastructure.configuration.ai_settings import AiSettings
from pr_copilot.infrastructure.providers.backend_factory import BackendFactory
from pr_copilot.infrastructure.providers.ollama.ollama_backend import OllamaBackend
from pr_copilot.infrastructure.providers.openai.openai_backend import OpenAiBackend


def test_only_configured_providers_get_a_backend() -> None:
    settings = AiSettings(_env_file=None, OPENAI_API_KEY="sk-test", OLLAMA_MODEL="llama3.1")

    backends = BackendFactory.build_backends(settings)

    assert set(backends) == {ProviderType.OPENAI, ProviderType.OLLAMA}
    assert isinstance(backends[ProviderType.OPENAI], OpenAiBackend)
    assert backends[ProviderType.OPENAI].model == "gpt-4o-mini"
    assert isinstance(backends[ProviderType.OLLAMA], OllamaBackend)
    assert str(backends[ProviderType.OLLAMA].client.base_url) == "http://localhost:11434"


def test_no_credentials_means_no_backends() -> None:
    assert BackendFactory.build_backends(AiSettings(_env_file=None)) == {}


def test_every_vendor_with_credentials() -> None:
    settings = AiSettings(
        _env_file=None,
        OPENAI_API_KEY="sk-test",
        ANTHROPIC_API_KEY="sk-ant-test",
        GEMINI_API_KEY="gm-test",
        OLLAMA_MODEL="llama3.1",
    )

    backends = BackendFactory.build_backends(settings)

    assert set(backends) == set(ProviderType)
    assert all(backends[p].provider is p for p in ProviderType)


def test_construction_is_limited_to_requested_providers() -> None:
    settings = AiSettings(_env_file=None, OPENAI_API_KEY="sk-test", OLLAMA_MODEL="llama3.1")

    backends = BackendFactory.build_backends(settings, {ProviderType.OLLAMA, ProviderType.GEMINI})

    assert set(backends) == {ProviderType.OLLAMA}
