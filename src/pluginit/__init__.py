"""Two-phase plugin lifecycle orchestration.

Runs every plugin's ``init`` hook in list order, then every plugin's
``post_init`` hook in list order. Both hooks are optional.

Usage:
    from pluginit import init_plugins

    await init_plugins([db_plugin, cache_plugin, api_plugin])
"""

from __future__ import annotations

from pluginit.lifecycle import has_hook, init_plugins
from pluginit.types import BaseHooks, InitHook, Plugin, PostInitHook

__version__ = "0.1.0"

__all__ = [
    "BaseHooks",
    "InitHook",
    "Plugin",
    "PostInitHook",
    "has_hook",
    "init_plugins",
]
