from abc import ABC, abstractmethod


class IThemeAccessor(ABC):
    @property
    @abstractmethod
    def theme(self) -> str:
        pass

    @abstractmethod
    def toggle(self) -> str:
        pass
