from abc import ABC, abstractmethod


class ISessionPingRepo(ABC):
    @abstractmethod
    async def ping(self) -> bool:
        """
        Returns:
            True while the server-side session is active, False once it expired

        Raises:
            ApiRequestError: Transport failure (server unreachable)
        """
        pass
