"""
Cancellable repeating task

Runs an async callback every `interval` seconds inside an anyio task group
until `stop()` is called or the enclosing scope is cancelled. A failing
callback is logged and the loop keeps going.
"""

from typing import Awaitable, Callable

import anyio
from anyio.abc import TaskGroup

from src.platform.logging.loguru_io import Logger


class RepeatingTask:
    def __init__(
        self,
        *,
        name: str,
        interval: float,
        callback: Callable[[], Awaitable[None]],
    ) -> None:
        if interval <= 0:
            raise ValueError('interval must be positive')
        self.name = name
        self.interval = interval
        self._callback = callback
        self._cancel_scope: anyio.CancelScope | None = None
        self.run_count = 0

    @property
    def is_running(self) -> bool:
        return self._cancel_scope is not None

    def start(self, *, task_group: TaskGroup) -> None:
        if self.is_running:
            return
        scope = anyio.CancelScope()
        self._cancel_scope = scope
        task_group.start_soon(self._run, scope, name=self.name)

    def stop(self) -> None:
        if self._cancel_scope is not None:
            self._cancel_scope.cancel()
            self._cancel_scope = None
            Logger.base.info(f'⏹️ [{self.name}] stopped after {self.run_count} runs')

    async def _run(self, scope: anyio.CancelScope) -> None:
        # A scope cancelled before this task got scheduled exits immediately
        with scope:
            while True:
                await anyio.sleep(self.interval)
                try:
                    await self._callback()
                except Exception as e:
                    Logger.base.warning(f'⚠️ [{self.name}] run failed: {e}')
                finally:
                    self.run_count += 1
