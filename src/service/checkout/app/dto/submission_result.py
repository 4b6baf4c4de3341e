from typing import List, Optional

import attrs

from src.service.checkout.app.dto.booking_request import BookingReceipt


DEFAULT_SUBMISSION_ERROR = 'Failed to complete booking'


@attrs.define(frozen=True)
class SeatBookingFailure:
    seat_number: str
    reason: str
    status_code: int = 0


@attrs.define(frozen=True)
class SubmissionResult:
    """
    Joined outcome of the per-seat booking writes.

    A failed submission may still contain receipts: seats booked before a
    sibling failed are not cancelled.
    """

    receipts: List[BookingReceipt] = attrs.field(factory=list)
    failures: List[SeatBookingFailure] = attrs.field(factory=list)

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def is_partial(self) -> bool:
        return bool(self.failures) and bool(self.receipts)

    @property
    def error_message(self) -> Optional[str]:
        if not self.failures:
            return None
        return self.failures[0].reason or DEFAULT_SUBMISSION_ERROR
