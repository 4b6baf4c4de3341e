from abc import ABC, abstractmethod


class INavigator(ABC):
    """Routing collaborator: moves the user to another client page"""

    @abstractmethod
    def navigate(self, path: str) -> None:
        pass
