from abc import ABC, abstractmethod
from typing import Optional

from src.service.checkout.domain.entity.showtime_entity import Showtime


class IShowtimeQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, showtime_id: int) -> Optional[Showtime]:
        """
        Args:
            showtime_id: Showtime ID

        Returns:
            Showtime or None when the backend reports it as not found

        Raises:
            ApiRequestError: Transport failure or unexpected backend answer
        """
        pass
