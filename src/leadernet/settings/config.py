"""Configuration loader for leadernet services using Pydantic settings."""

from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, get_args

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

ENV_VAR_NAME = "LEADERNET_ENV"
DEFAULT_ENV = "local"
PROJECT_ROOT = Path(__file__).resolve().parents[3]
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "settings.default.toml"
LOCAL_CONFIG_FILE = CONFIG_DIR / "settings.local.toml"
SETTINGS_FILE_ENV_VAR = "LEADERNET_SETTINGS_FILE"


def _resolve_env(explicit_env: str | None = None) -> str:
    """Return the active environment name.

    Args:
        explicit_env: Environment value supplied directly by the caller.

    Returns:
        A stripped environment name, falling back to ``DEFAULT_ENV``.
    """

    env = explicit_env or os.getenv(ENV_VAR_NAME) or DEFAULT_ENV
    return env.strip()


def _env_file_candidates(env: str) -> list[Path]:
    """List candidate ``.env`` files used during settings resolution."""

    return [
        PROJECT_ROOT / ".env",
        PROJECT_ROOT / f".env.{env}",
        PROJECT_ROOT / ".env.local",
    ]


def _resolve_config_path(raw_path: str | None) -> Path | None:
    """Return an absolute config path from user input."""

    if not raw_path:
        return None
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        candidate = (PROJECT_ROOT / candidate).resolve()
    return candidate


def _config_file_priority(include_missing: bool = False) -> tuple[Path, ...]:
    """Return config files in descending precedence order."""

    ordered: list[Path] = []
    env_override = _resolve_config_path(os.getenv(SETTINGS_FILE_ENV_VAR))
    if env_override:
        ordered.append(env_override)
    ordered.append(LOCAL_CONFIG_FILE)
    ordered.append(DEFAULT_CONFIG_FILE)
    if include_missing:
        return tuple(ordered)
    return tuple(path for path in ordered if path.exists())


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Pydantic settings source that loads values from a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path) -> None:
        super().__init__(settings_cls)
        self.path = path
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data
        if not self.path.exists():
            self._data = {}
            return self._data
        try:
            with self.path.open("rb") as handle:
                self._data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:  # pragma: no cover - invalid files surface immediately
            raise ValueError(f"Invalid TOML syntax in {self.path}") from exc
        return self._data

    def __call__(self) -> dict[str, Any]:  # pragma: no cover - trivial wrapper
        return self._load()

    def get_field_value(self, field_name: str, field):  # pragma: no cover - passthrough helper
        data = self._load()
        return data.get(field_name), field_name in data


def _read_env_value(*keys: str) -> str | None:
    """Return the first present environment variable from ``keys``."""

    for key in keys:
        value = os.getenv(key)
        if value is not None:
            return value
    return None


class RuntimeSettings(BaseSettings):
    """Process-level runtime controls."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "RUNTIME__LOG_LEVEL"),
    )


class APISettings(BaseSettings):
    """HTTP server binding used by the CLI launcher."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    host: str = Field(
        default="127.0.0.1",
        validation_alias=AliasChoices("API_HOST", "API__HOST"),
    )
    port: int = Field(
        default=8000,
        validation_alias=AliasChoices("API_PORT", "API__PORT"),
    )


LLMProvider = Literal["ollama", "openai", "mock"]


class LLMSettings(BaseSettings):
    """Large language model provider settings."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    provider: LLMProvider = Field(
        default="ollama",
        validation_alias=AliasChoices("LLM_PROVIDER", "LLM__PROVIDER"),
    )
    chat_model: str = Field(
        default="llama3.1",
        validation_alias=AliasChoices("LLM_CHAT_MODEL", "LLM__CHAT_MODEL"),
    )
    temperature: float = Field(
        default=0.3,
        validation_alias=AliasChoices("LLM_TEMPERATURE", "LLM__TEMPERATURE"),
    )
    ollama_base_url: str = Field(
        default="http://127.0.0.1:11434",
        validation_alias=AliasChoices("OLLAMA_BASE_URL", "LLM__OLLAMA_BASE_URL"),
    )
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "LLM__OPENAI_API_KEY"),
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        validation_alias=AliasChoices("LLM_OPENAI_MODEL", "LLM__OPENAI_MODEL"),
    )
    max_input_chars: int = Field(
        default=12000,
        validation_alias=AliasChoices("LLM_MAX_INPUT_CHARS", "LLM__MAX_INPUT_CHARS"),
    )


class NewsSettings(BaseSettings):
    """GDELT news feed configuration."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    gdelt_base_url: str = Field(
        default="https://api.gdeltproject.org/api/v2/doc/doc",
        validation_alias=AliasChoices("GDELT_BASE_URL", "NEWS__GDELT_BASE_URL"),
    )
    timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices("NEWS_TIMEOUT_SECONDS", "NEWS__TIMEOUT_SECONDS"),
    )
    default_days_back: int = Field(
        default=30,
        validation_alias=AliasChoices("NEWS_DEFAULT_DAYS_BACK", "NEWS__DEFAULT_DAYS_BACK"),
    )
    default_max_records: int = Field(
        default=250,
        validation_alias=AliasChoices("NEWS_DEFAULT_MAX_RECORDS", "NEWS__DEFAULT_MAX_RECORDS"),
    )


class NetworkSettings(BaseSettings):
    """Defaults for network assembly and normalization."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    default_num_connections: int = Field(
        default=12,
        validation_alias=AliasChoices("NETWORK_DEFAULT_NUM_CONNECTIONS", "NETWORK__DEFAULT_NUM_CONNECTIONS"),
    )
    max_num_connections: int = Field(
        default=50,
        validation_alias=AliasChoices("NETWORK_MAX_NUM_CONNECTIONS", "NETWORK__MAX_NUM_CONNECTIONS"),
    )
    news_english_only: bool = Field(
        default=False,
        validation_alias=AliasChoices("NETWORK_NEWS_ENGLISH_ONLY", "NETWORK__NEWS_ENGLISH_ONLY"),
    )
    scenario_summary_limit: int = Field(
        default=20,
        validation_alias=AliasChoices("NETWORK_SCENARIO_SUMMARY_LIMIT", "NETWORK__SCENARIO_SUMMARY_LIMIT"),
    )


class ObservabilitySettings(BaseSettings):
    """Logging and metrics configuration."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    structured_logging: bool = Field(
        default=True,
        validation_alias=AliasChoices("OBS_STRUCTURED_LOGGING", "OBSERVABILITY__STRUCTURED_LOGGING"),
    )
    statsd_host: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OBS_STATSD_HOST", "OBSERVABILITY__STATSD_HOST"),
    )
    statsd_port: int = Field(
        default=8125,
        validation_alias=AliasChoices("OBS_STATSD_PORT", "OBSERVABILITY__STATSD_PORT"),
    )
    statsd_prefix: str = Field(
        default="leadernet",
        validation_alias=AliasChoices("OBS_STATSD_PREFIX", "OBSERVABILITY__STATSD_PREFIX"),
    )


class Settings(BaseSettings):
    """Top-level configuration model with nested sections for each subsystem."""

    env: str = Field(
        default_factory=lambda: _resolve_env(),
        validation_alias=AliasChoices("ENV", "ENVIRONMENT", "RUNTIME__ENV"),
    )
    project_root: Path = Field(default=PROJECT_ROOT)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)
    api: APISettings = Field(default_factory=APISettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    news: NewsSettings = Field(default_factory=NewsSettings)
    network: NetworkSettings = Field(default_factory=NetworkSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    env_files: tuple[Path, ...] = Field(default_factory=tuple, exclude=True)
    config_files: tuple[Path, ...] = Field(default_factory=tuple, exclude=True)

    model_config = SettingsConfigDict(
        env_prefix="LEADERNET_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Extend settings sources with TOML-based config files."""

        config_sources = [TomlConfigSettingsSource(settings_cls, path) for path in _config_file_priority()]
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            *config_sources,
            file_secret_settings,
        )

    @model_validator(mode="after")
    def _apply_environment_overrides(self) -> "Settings":
        """Honor flat env names once TOML has populated the nested sections.

        A section built from ``config/settings.*.toml`` is validated from that
        dict and never reads its own ``AliasChoices`` env names, so
        ``LLM_PROVIDER`` and friends are applied here, case-insensitively.
        """

        provider_override = _read_env_value(
            "LEADERNET_LLM__PROVIDER",
            "LEADERNET_LLM_PROVIDER",
            "LLM__PROVIDER",
            "LLM_PROVIDER",
        )
        if provider_override:
            provider = provider_override.strip().lower()
            if provider not in get_args(LLMProvider):
                raise ValueError(f"Unsupported LLM provider: {provider_override!r}")
            object.__setattr__(self, "llm", self.llm.model_copy(update={"provider": provider}))

        english_override = _read_env_value(
            "LEADERNET_NETWORK__NEWS_ENGLISH_ONLY",
            "LEADERNET_NETWORK_NEWS_ENGLISH_ONLY",
        )
        if english_override is not None:
            lowered = english_override.strip().lower()
            network_updates = {"news_english_only": lowered not in {"false", "0", "off", "no"}}
            object.__setattr__(self, "network", self.network.model_copy(update=network_updates))

        return self

    @property
    def log_level(self) -> str:
        """str: Effective logging level for the running process."""

        return self.runtime.log_level

    @property
    def is_local(self) -> bool:
        """bool: True when the active environment is ``local``."""

        return self.env.lower() == "local"


def _load_settings(env: str | None = None) -> Settings:
    """Load settings with optional environment override.

    Args:
        env: Environment name supplied programmatically.

    Returns:
        Fully parsed :class:`Settings` instance with env files applied.
    """

    resolved_env = _resolve_env(env)
    candidate_files = [path for path in _env_file_candidates(resolved_env) if path.exists()]
    config_files = _config_file_priority()
    return Settings(
        _env_file=[str(path) for path in candidate_files],
        _env_file_encoding="utf-8",
        env=resolved_env,
        env_files=tuple(candidate_files),
        config_files=config_files,
    )


@lru_cache(maxsize=1)
def get_settings(env: str | None = None) -> Settings:
    """Return cached settings for the requested environment."""

    return _load_settings(env)


def reload_settings(env: str | None = None) -> Settings:
    """Clear the cached settings and reload from disk."""

    get_settings.cache_clear()
    return get_settings(env)


__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    "PROJECT_ROOT",
    "ENV_VAR_NAME",
]
