"""Traced plugin startup — the two lifecycle phases plus structured logging.

:func:`pluginit.init_plugins` is deliberately silent. Applications that want
startup visible in their logs call :func:`run_plugins` instead; ordering and
error propagation are the same.
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence

from pluginit.config import Settings, get_settings
from pluginit.lifecycle import run_phases
from pluginit.logger import logger
from pluginit.types import Plugin


def plugin_label(plugin: Plugin) -> str:
    """Human-readable plugin name for log events."""
    name = getattr(plugin, "name", None)
    if isinstance(name, str) and name:
        return name
    return type(plugin).__name__


async def run_plugins(plugins: Iterable[Plugin], *, settings: Settings | None = None) -> None:
    """Run both lifecycle phases with logging.

    Re-raises the failing hook's exception unchanged after logging it.
    """
    s = settings if settings is not None else get_settings()
    trace = s.lifecycle.trace_hooks
    if not isinstance(plugins, Sequence):
        plugins = list(plugins)

    current: dict[str, str] = {}

    def _observe(phase: str, plugin: Plugin) -> None:
        # Record the hook first: plugin_label() reads plugin attributes and may raise.
        current["phase"] = phase
        current["plugin"] = type(plugin).__name__
        current["plugin"] = plugin_label(plugin)
        if trace:
            # Opt-in, so logged at info to pass the usual default level
            logger.info("Running plugin hook", phase=phase, plugin=current["plugin"])

    logger.info("Initializing plugins", count=len(plugins))
    started = time.monotonic()
    try:
        await run_phases(plugins, observer=_observe)
    except Exception:
        logger.exception(
            "Plugin hook failed",
            phase=current.get("phase"),
            plugin=current.get("plugin"),
        )
        raise
    logger.info(
        "Plugins initialized",
        count=len(plugins),
        elapsed_ms=round((time.monotonic() - started) * 1000, 1),
    )
