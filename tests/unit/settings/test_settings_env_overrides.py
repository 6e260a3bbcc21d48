"""Unit tests covering environment variable and TOML overrides for settings."""

from __future__ import annotations

import textwrap

import pytest
from pydantic import ValidationError

from leadernet.settings.config import reload_settings


def _clear_env(monkeypatch: object, *names: str) -> None:
    """Remove env vars for every alias and prefixed variant."""

    for name in names:
        monkeypatch.delenv(name, raising=False)
        if name.startswith("LEADERNET_"):
            monkeypatch.delenv(name.removeprefix("LEADERNET_"), raising=False)
        else:
            monkeypatch.delenv(f"LEADERNET_{name}", raising=False)


def test_llm_provider_env_override(monkeypatch: object) -> None:
    """Ensure the llm.provider value follows environment overrides."""

    _clear_env(monkeypatch, "LEADERNET_LLM__PROVIDER", "LEADERNET_LLM_PROVIDER", "LLM__PROVIDER", "LLM_PROVIDER")

    default_settings = reload_settings(env="dev")
    assert default_settings.llm.provider == "ollama"
    assert default_settings.llm.temperature == 0.3

    monkeypatch.setenv("LEADERNET_LLM__PROVIDER", "mock")
    overridden_settings = reload_settings(env="dev")
    assert overridden_settings.llm.provider == "mock"

    monkeypatch.delenv("LEADERNET_LLM__PROVIDER")
    monkeypatch.setenv("LLM_PROVIDER", "OpenAI")
    assert reload_settings(env="dev").llm.provider == "openai"


def test_network_and_news_env_overrides(monkeypatch: object) -> None:
    """Verify english-only and news timeout settings respect env vars."""

    _clear_env(
        monkeypatch,
        "LEADERNET_NETWORK__NEWS_ENGLISH_ONLY",
        "LEADERNET_NETWORK_NEWS_ENGLISH_ONLY",
        "LEADERNET_NEWS__TIMEOUT_SECONDS",
        "LEADERNET_NETWORK__DEFAULT_NUM_CONNECTIONS",
    )

    default_settings = reload_settings(env="dev")
    assert default_settings.network.news_english_only is False
    assert default_settings.network.default_num_connections == 12
    assert default_settings.news.timeout_seconds == 30.0

    monkeypatch.setenv("LEADERNET_NETWORK__NEWS_ENGLISH_ONLY", "true")
    monkeypatch.setenv("LEADERNET_NEWS__TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("LEADERNET_NETWORK__DEFAULT_NUM_CONNECTIONS", "8")
    overridden = reload_settings(env="dev")
    assert overridden.network.news_english_only is True
    assert overridden.news.timeout_seconds == 5.0
    assert overridden.network.default_num_connections == 8


def test_settings_file_override(tmp_path, monkeypatch: object) -> None:
    """Ensure TOML config files populate settings without manual env vars."""

    _clear_env(monkeypatch, "LEADERNET_LLM__CHAT_MODEL", "LEADERNET_NETWORK__SCENARIO_SUMMARY_LIMIT", "LEADERNET_ENV")
    monkeypatch.setenv("LEADERNET_ENV", "dev")

    settings_file = tmp_path / "settings.custom.toml"
    settings_file.write_text(
        textwrap.dedent(
            """
            env = "dev"

            [llm]
            chat_model = "qwen2.5"

            [network]
            scenario_summary_limit = 10
            """
        ).strip(),
        encoding="utf-8",
    )

    monkeypatch.setenv("LEADERNET_SETTINGS_FILE", str(settings_file))
    settings_from_file = reload_settings()
    assert settings_from_file.llm.chat_model == "qwen2.5"
    assert settings_from_file.network.scenario_summary_limit == 10
    assert settings_file in settings_from_file.config_files

    monkeypatch.setenv("LEADERNET_LLM__CHAT_MODEL", "llama3.2")
    env_override = reload_settings()
    assert env_override.llm.chat_model == "llama3.2"


def test_local_config_overrides_default(tmp_path, monkeypatch: object) -> None:
    """Local config files should win over the default config file."""

    _clear_env(monkeypatch, "LEADERNET_NEWS__DEFAULT_DAYS_BACK", "LEADERNET_SETTINGS_FILE", "LEADERNET_ENV")

    local_file = tmp_path / "settings.local.toml"
    local_file.write_text("[news]\ndefault_days_back = 3\n", encoding="utf-8")
    default_file = tmp_path / "settings.default.toml"
    default_file.write_text("[news]\ndefault_days_back = 14\ndefault_max_records = 100\n", encoding="utf-8")

    monkeypatch.setattr("leadernet.settings.config.LOCAL_CONFIG_FILE", local_file)
    monkeypatch.setattr("leadernet.settings.config.DEFAULT_CONFIG_FILE", default_file)

    settings = reload_settings(env="dev")
    assert settings.news.default_days_back == 3
    assert settings.news.default_max_records == 100
    assert local_file in settings.config_files
    assert default_file in settings.config_files
    assert settings.is_local is False


def test_flat_provider_override_rejects_unknown_values(monkeypatch: object) -> None:
    """Unsupported providers from flat env names fail settings validation."""

    _clear_env(monkeypatch, "LEADERNET_LLM__PROVIDER", "LEADERNET_LLM_PROVIDER", "LLM__PROVIDER", "LLM_PROVIDER")
    monkeypatch.setenv("LLM_PROVIDER", "bedrock")

    with pytest.raises(ValidationError, match="Unsupported LLM provider"):
        reload_settings(env="dev")
