"""Test doubles for code that drives plugin lifecycles.

``RecordingPlugin`` implements both hooks and remembers how it was called.
Several instances can share one ``events`` list to check ordering across
plugins::

    events: list[tuple[str, str]] = []
    a = RecordingPlugin("a", events=events)
    b = RecordingPlugin("b", events=events)
    await init_plugins([a, b])
    assert events == [("a", "init"), ("b", "init"), ("a", "post_init"), ("b", "post_init")]
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Literal

from pluginit.types import INIT, POST_INIT, Plugin


class RecordingPlugin:
    """Plugin that records calls to ``init`` and ``post_init``.

    Args:
        name: Label used in ``events`` and in log output.
        events: Shared list that receives ``(name, hook)`` once a hook finishes.
        delay: Seconds each hook sleeps before it records completion.
        fail_on: Hook that raises ``error`` after marking itself called.
        error: Exception raised by the ``fail_on`` hook.
    """

    def __init__(
        self,
        name: str = "recording",
        *,
        events: list[tuple[str, str]] | None = None,
        delay: float = 0.0,
        fail_on: Literal["init", "post_init"] | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.name = name
        self.events = events if events is not None else []
        self.delay = delay
        self.fail_on = fail_on
        self.error = error if error is not None else RuntimeError(f"{name} {fail_on} failed")

        self.init_called = False
        self.post_init_called = False
        self.plugins_received: list[Plugin] | None = None

    async def init(self, plugins: Sequence[Plugin]) -> None:
        self.init_called = True
        self.plugins_received = list(plugins)
        await self._finish(INIT)

    async def post_init(self) -> None:
        self.post_init_called = True
        await self._finish(POST_INIT)

    async def _finish(self, hook: str) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail_on == hook:
            raise self.error
        self.events.append((self.name, hook))

    def __repr__(self) -> str:
        return f"RecordingPlugin({self.name!r})"
