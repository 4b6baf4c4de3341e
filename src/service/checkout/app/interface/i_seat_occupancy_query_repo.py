from abc import ABC, abstractmethod

from src.service.checkout.app.dto.seat_occupancy import SeatOccupancy


class ISeatOccupancyQueryRepo(ABC):
    @abstractmethod
    async def get_occupancy(self, *, showtime_id: int) -> SeatOccupancy:
        """
        Seats already booked for a showtime.

        Raises:
            ApiRequestError: Transport failure or non-2xx answer
        """
        pass
