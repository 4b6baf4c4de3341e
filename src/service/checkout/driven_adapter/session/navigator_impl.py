from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.interface.i_navigator import INavigator


class HistoryNavigator(INavigator):
    """Records navigation requests; the host UI reads current_path to switch pages"""

    def __init__(self) -> None:
        self.history: List[str] = []

    @property
    def current_path(self) -> Optional[str]:
        return self.history[-1] if self.history else None

    def navigate(self, path: str) -> None:
        Logger.base.info(f'🧭 [NAV] -> {path}')
        self.history.append(path)
