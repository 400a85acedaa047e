"""Plugin shapes understood by the orchestrator."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

Plugin: TypeAlias = Any
InitHook: TypeAlias = Callable[[Sequence[Plugin]], Awaitable[None] | None]
PostInitHook: TypeAlias = Callable[[], Awaitable[None] | None]

INIT = "init"
POST_INIT = "post_init"


@dataclass
class BaseHooks:
    """Plugin built from plain functions.

    Either hook may be left as ``None``; the orchestrator skips it. Plugins
    don't need to use this class: any object with ``init`` and/or
    ``post_init`` attributes works.
    """

    init: InitHook | None = None
    post_init: PostInitHook | None = None
