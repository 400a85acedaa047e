"""Tests for pluginit.logger: no global side effects until configure_logging()."""

from __future__ import annotations

import importlib
import logging
import sys

import pytest
import structlog

import pluginit.logger
from pluginit.config import LifecycleConfig, LoggingConfig
from pluginit.logger import LOGGER_NAME, configure_logging
from pluginit.runner import run_plugins
from pluginit.testing import RecordingPlugin
from conftest import make_settings


@pytest.fixture
def clean_structlog():
    """Restore structlog and the pluginit stdlib logger after a test configures them."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    logging.getLogger(LOGGER_NAME).setLevel(logging.NOTSET)


class TestImportSideEffects:
    def test_import_leaves_excepthook_alone(self, clean_structlog):
        before = sys.excepthook

        importlib.reload(pluginit.logger)

        assert sys.excepthook is before

    def test_import_does_not_configure_structlog(self, clean_structlog):
        importlib.reload(pluginit.logger)

        assert not structlog.is_configured()

    def test_import_does_not_touch_stdlib_levels(self, clean_structlog):
        importlib.reload(pluginit.logger)

        assert logging.getLogger(LOGGER_NAME).level == logging.NOTSET


class TestConfigureLogging:
    def test_explicit_level(self, clean_structlog):
        configure_logging("debug")

        assert structlog.is_configured()
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_level_defaults_to_settings(self, clean_structlog, monkeypatch):
        monkeypatch.setattr(
            "pluginit.config._settings",
            make_settings(logging=LoggingConfig(level="WARNING")),
        )

        configure_logging()

        assert logging.getLogger(LOGGER_NAME).level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self, clean_structlog):
        configure_logging("chatty")

        assert logging.getLogger(LOGGER_NAME).level == logging.INFO

    @pytest.mark.asyncio
    async def test_hook_trace_reaches_stdlib_output(self, clean_structlog, monkeypatch, caplog):
        monkeypatch.setattr(
            "pluginit.config._settings",
            make_settings(lifecycle=LifecycleConfig(trace_hooks=True)),
        )
        configure_logging()
        # Fresh proxy so the module-level logger never caches this configuration
        monkeypatch.setattr("pluginit.runner.logger", structlog.get_logger(LOGGER_NAME))

        await run_plugins([RecordingPlugin("db")])

        assert "Running plugin hook" in caplog.text
        assert "Plugins initialized" in caplog.text
