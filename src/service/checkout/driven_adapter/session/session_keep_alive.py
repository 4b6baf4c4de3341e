"""
Session keep-alive

Pings the backend on a fixed interval so an idle browser session does not
expire. Runs as a RepeatingTask in the host's task group and shares no
state with checkout sessions; a failed ping is only logged.
"""

from anyio.abc import TaskGroup

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.platform.task.repeating_task import RepeatingTask
from src.service.checkout.app.interface.i_session_ping_repo import ISessionPingRepo


class SessionKeepAlive:
    def __init__(
        self,
        *,
        ping_repo: ISessionPingRepo,
        interval: float | None = None,
    ) -> None:
        self._ping_repo = ping_repo
        self._task = RepeatingTask(
            name='KEEP-ALIVE',
            interval=interval or settings.KEEP_ALIVE_INTERVAL_SECONDS,
            callback=self._ping_once,
        )
        self.last_active: bool | None = None

    @property
    def is_running(self) -> bool:
        return self._task.is_running

    @property
    def ping_count(self) -> int:
        return self._task.run_count

    def start(self, *, task_group: TaskGroup) -> None:
        self._task.start(task_group=task_group)

    def stop(self) -> None:
        self._task.stop()

    async def _ping_once(self) -> None:
        self.last_active = await self._ping_repo.ping()
        if not self.last_active:
            Logger.base.warning('⚠️ [KEEP-ALIVE] Server session is no longer active')
