"""Test that configuration is read from the environment once."""

import pytest

from backend.app.config import Settings, get_settings


def test_settings_cached() -> None:
    """Test that get_settings returns a single instance."""
    assert get_settings() is get_settings()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test deployment defaults."""
    for name in ("LLM_PROVIDER", "BUDGET_POLICY", "MAX_TOKENS", "WEB_SEARCH_MAX_USES"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.llm_provider == "anthropic"
    assert settings.budget_policy == "exact_fit"
    assert settings.max_tokens == 4000
    assert settings.web_search_max_uses == 5


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test values come from environment variables."""
    monkeypatch.setenv("LLM_PROVIDER", "openai")
    monkeypatch.setenv("BUDGET_POLICY", "luxury")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.llm_provider == "openai"
    assert settings.budget_policy == "luxury"
    assert settings.openai_api_key.get_secret_value() == "sk-env"


def test_unknown_policy_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the policy must be one of the known names."""
    monkeypatch.setenv("BUDGET_POLICY", "backpacker")

    with pytest.raises(ValueError):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_api_key_hidden_in_repr() -> None:
    """Test secrets never appear in the settings repr."""
    settings = Settings(anthropic_api_key="sk-ant-secret", _env_file=None)  # type: ignore[call-arg]

    assert "sk-ant-secret" not in repr(settings)
