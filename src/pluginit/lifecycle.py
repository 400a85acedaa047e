"""Plugin initializer: the ``init`` phase followed by the ``post_init`` phase.

Each hook is awaited before the next one starts, and every ``init`` has
resolved before the first ``post_init`` runs. Plugins can therefore wire
themselves to their peers in ``init`` and rely on that wiring in
``post_init``.

Hook failures are not caught here. The first exception aborts the run and
reaches the caller as-is.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Sequence
from typing import TypeAlias

from pluginit.types import INIT, POST_INIT, Plugin

# Called before each hook invocation with (phase, plugin).
HookObserver: TypeAlias = Callable[[str, Plugin], None]


def has_hook(plugin: Plugin, name: str) -> bool:
    """Whether ``plugin`` exposes the hook ``name``.

    Falsy attributes (``None``, ``False``, ``0``, ``""``) count as absent.
    """
    return bool(getattr(plugin, name, None))


async def init_plugins(plugins: Iterable[Plugin]) -> None:
    """Run ``init(plugins)`` on every plugin, then ``post_init()`` on every plugin.

    Hooks may be sync or async. Each ``init`` receives the same sequence object
    that is being iterated, not a copy, so a plugin that mutates it changes what
    later plugins see.

    Raises:
        Whatever the first failing hook raises, unchanged.
    """
    await run_phases(plugins)


async def run_phases(plugins: Iterable[Plugin], observer: HookObserver | None = None) -> None:
    """Two-phase loop shared by :func:`init_plugins` and the traced runner."""
    if not isinstance(plugins, Sequence):
        plugins = list(plugins)

    for plugin in plugins:
        if not has_hook(plugin, INIT):
            continue
        if observer is not None:
            observer(INIT, plugin)
        await _settle(plugin.init(plugins))

    for plugin in plugins:
        if not has_hook(plugin, POST_INIT):
            continue
        if observer is not None:
            observer(POST_INIT, plugin)
        await _settle(plugin.post_init())


async def _settle(result: object) -> None:
    # Sync hooks return a plain value; only awaitables need resolving.
    if inspect.isawaitable(result):
        await result
