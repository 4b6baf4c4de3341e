from typing import List

import anyio
from opentelemetry import trace

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import ApiRequestError, DomainError
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.dto.booking_request import (
    BookingConcessionLine,
    BookingReceipt,
    BookingRequest,
)
from src.service.checkout.app.dto.submission_result import (
    DEFAULT_SUBMISSION_ERROR,
    SeatBookingFailure,
    SubmissionResult,
)
from src.service.checkout.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.checkout.domain.aggregate.checkout_session_aggregate import CheckoutSession


NO_SEATS_SELECTED = 'Please select at least one seat'


class SubmitCheckoutUseCase:
    """
    Confirm a checkout: one create-booking write per selected seat.

    Flow:
    1. Freeze the per-seat requests in selection order
    2. Attach the concession list to the first seat only; every other seat
       carries an empty list (concessions are bought once per transaction)
    3. Issue all writes concurrently and join them
    4. Report success only when every write succeeded

    Each write records its own outcome, so one failing seat never cancels its
    siblings. Seats booked before a failure are kept as-is: the backend has no
    multi-seat atomic endpoint and nothing here compensates.
    """

    def __init__(
        self,
        *,
        booking_repo: IBookingCommandRepo,
        ticket_type: str | None = None,
    ) -> None:
        self.booking_repo = booking_repo
        self.ticket_type = ticket_type or settings.DEFAULT_TICKET_TYPE
        self.tracer = trace.get_tracer(__name__)

    def build_requests(self, session: CheckoutSession) -> List[BookingRequest]:
        concession_lines = [
            BookingConcessionLine(
                concession_id=line.concession_id,
                name=line.item.name,
                price=line.item.price,
                quantity=line.quantity,
            )
            for line in session.concession_lines
        ]
        promotion_code = session.active_promotion.code if session.active_promotion else None

        return [
            BookingRequest(
                showtime_id=session.showtime.id,
                seat_number=seat.label,
                ticket_type=self.ticket_type,
                concessions=list(concession_lines) if index == 0 else [],
                promotion_code=promotion_code,
            )
            for index, seat in enumerate(session.selected_seats)
        ]

    @Logger.io
    async def execute(self, *, session: CheckoutSession) -> SubmissionResult:
        requests = self.build_requests(session)
        if not requests:
            raise DomainError(NO_SEATS_SELECTED)

        with self.tracer.start_as_current_span(
            'use_case.submit_checkout',
            attributes={
                'showtime.id': session.showtime.id,
                'booking.seat_count': len(requests),
            },
        ):
            outcomes: List[BookingReceipt | SeatBookingFailure | None] = [None] * len(requests)

            async with anyio.create_task_group() as tg:
                for index, request in enumerate(requests):
                    tg.start_soon(self._create_one, index, request, outcomes)

            result = SubmissionResult(
                receipts=[o for o in outcomes if isinstance(o, BookingReceipt)],
                failures=[o for o in outcomes if isinstance(o, SeatBookingFailure)],
            )

            if result.success:
                Logger.base.info(
                    f'✅ [CHECKOUT] Booked {len(result.receipts)} seats for showtime '
                    f'{session.showtime.id}'
                )
            else:
                Logger.base.warning(
                    f'❌ [CHECKOUT] {len(result.failures)}/{len(requests)} seat bookings failed '
                    f'for showtime {session.showtime.id}'
                    + (' (partial: booked seats are not cancelled)' if result.is_partial else '')
                )
            return result

    async def _create_one(
        self,
        index: int,
        request: BookingRequest,
        outcomes: List[BookingReceipt | SeatBookingFailure | None],
    ) -> None:
        try:
            outcomes[index] = await self.booking_repo.create_booking(request=request)
        except ApiRequestError as e:
            outcomes[index] = SeatBookingFailure(
                seat_number=request.seat_number,
                reason=e.user_message or DEFAULT_SUBMISSION_ERROR,
                status_code=e.status_code,
            )
