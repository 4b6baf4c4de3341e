"""Application layer DTOs"""

from src.service.checkout.app.dto.booking_request import (
    BookingConcessionLine,
    BookingReceipt,
    BookingRequest,
)
from src.service.checkout.app.dto.checkout_entry_result import CheckoutEntryResult
from src.service.checkout.app.dto.seat_occupancy import SeatOccupancy
from src.service.checkout.app.dto.submission_result import (
    DEFAULT_SUBMISSION_ERROR,
    SeatBookingFailure,
    SubmissionResult,
)

__all__ = [
    'DEFAULT_SUBMISSION_ERROR',
    'BookingConcessionLine',
    'BookingReceipt',
    'BookingRequest',
    'CheckoutEntryResult',
    'SeatBookingFailure',
    'SeatOccupancy',
    'SubmissionResult',
]
