"""Shared test fixtures for pluginit."""

from __future__ import annotations

import pytest

# ---------------------------------------------------------------------------
# Shared helpers (plain functions, not fixtures — importable by test files)
# ---------------------------------------------------------------------------


def make_settings(**overrides):
    """Create a Settings object from pure defaults, without reading any file.

    Usage::

        s = make_settings(lifecycle=LifecycleConfig(trace_hooks=True))
    """
    from pluginit.config import LifecycleConfig, LoggingConfig, Settings

    defaults = {
        "logging": LoggingConfig(),
        "lifecycle": LifecycleConfig(),
    }
    defaults.update(overrides)
    return Settings.model_construct(**defaults)


# ---------------------------------------------------------------------------
# Autouse fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Ensure each test starts with a clean Settings singleton.

    No pluginit.toml, no .env: tests never see a developer's local config.
    """
    monkeypatch.setattr("pluginit.config._settings", make_settings())


# ---------------------------------------------------------------------------
# Reusable fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def events() -> list[tuple[str, str]]:
    """Shared hook log for RecordingPlugin instances."""
    return []
