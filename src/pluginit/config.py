"""Configuration — Pydantic BaseSettings with TOML + dotenv sources.

Settings live in ``pluginit.toml``. Environment variables override it using
the ``PLUGINIT_`` prefix and ``__`` as the nested delimiter (e.g.
``PLUGINIT_LIFECYCLE__TRACE_HOOKS=true``).

Priority (highest wins): init args > env vars > .env > pluginit.toml

Usage::

    from pluginit.config import get_settings

    s = get_settings()
    print(s.lifecycle.trace_hooks)
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)


class _StrictModel(BaseModel):
    """Base for config sections — unknown keys are rejected so typos fail loudly."""

    model_config = {"extra": "forbid"}


class LoggingConfig(_StrictModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()


class LifecycleConfig(_StrictModel):
    trace_hooks: bool = False  # debug event per hook call in run_plugins()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        toml_file="pluginit.toml",
        env_file=".env",
        env_prefix="PLUGINIT_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    lifecycle: LifecycleConfig = LifecycleConfig()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Priority: init > env vars > .env > pluginit.toml > file secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Lazy cached singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Clear the cached singleton (for tests)."""
    global _settings
    _settings = None
