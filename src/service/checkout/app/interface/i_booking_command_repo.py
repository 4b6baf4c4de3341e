"""
Booking Command Repository Interface

The backend creates one booking (ticket) per seat; there is no multi-seat
atomic endpoint, so callers fan out one create call per seat.
"""

from abc import ABC, abstractmethod

from src.service.checkout.app.dto.booking_request import BookingReceipt, BookingRequest


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create_booking(self, *, request: BookingRequest) -> BookingReceipt:
        """
        Args:
            request: Single-seat booking request

        Returns:
            Receipt with the created ticket id

        Raises:
            ApiRequestError: When the backend rejects or the call fails
        """
        pass
