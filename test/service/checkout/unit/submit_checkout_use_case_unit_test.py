"""
Unit tests for SubmitCheckoutUseCase

Tests:
- One write per seat, concessions attached to the first-selected seat only
- Promotion code and ticket type on every write
- Writes are issued concurrently
- Partial failure is reported without touching the session
"""

from unittest.mock import AsyncMock

import anyio
import pytest

from src.platform.exception.exceptions import ApiRequestError, DomainError
from src.service.checkout.app.command.submit_checkout_use_case import (
    NO_SEATS_SELECTED,
    SubmitCheckoutUseCase,
)
from src.service.checkout.app.dto.booking_request import BookingReceipt, BookingRequest
from src.service.checkout.app.dto.submission_result import DEFAULT_SUBMISSION_ERROR
from src.service.checkout.domain.aggregate.checkout_session_aggregate import CheckoutSession
from src.service.checkout.domain.entity.concession_entity import ConcessionItem
from src.service.checkout.domain.entity.promotion_entity import Promotion


def _receipt_for(*, request: BookingRequest) -> BookingReceipt:
    return BookingReceipt(seat_number=request.seat_number, ticket_id=1, message='ok')


def _requests_sent(mock_booking_repo: AsyncMock) -> list[BookingRequest]:
    return [call.kwargs['request'] for call in mock_booking_repo.create_booking.await_args_list]


@pytest.mark.unit
class TestSubmitCheckoutUseCase:
    @pytest.fixture
    def mock_booking_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.create_booking = AsyncMock(side_effect=_receipt_for)
        return repo

    @pytest.fixture
    def use_case(self, mock_booking_repo: AsyncMock) -> SubmitCheckoutUseCase:
        return SubmitCheckoutUseCase(booking_repo=mock_booking_repo, ticket_type='adult')

    @pytest.fixture
    def filled_session(
        self,
        checkout_session: CheckoutSession,
        popcorn: ConcessionItem,
        soda: ConcessionItem,
        percent_promotion: Promotion,
    ) -> CheckoutSession:
        # Selection order is not alphabetical
        for label in ('C4', 'B2', 'E7'):
            checkout_session.toggle_seat(label)
        checkout_session.add_concession(popcorn)
        checkout_session.add_concession(popcorn)
        checkout_session.add_concession(soda)
        checkout_session.select_promotion(percent_promotion.id)
        return checkout_session

    @pytest.mark.asyncio
    async def test_concessions_attached_once__to_first_selected_seat(
        self,
        use_case: SubmitCheckoutUseCase,
        mock_booking_repo: AsyncMock,
        filled_session: CheckoutSession,
    ) -> None:
        # Act
        result = await use_case.execute(session=filled_session)

        # Assert
        assert result.success
        requests = _requests_sent(mock_booking_repo)
        assert len(requests) == 3

        with_concessions = [r for r in requests if r.concessions]
        assert len(with_concessions) == 1
        assert with_concessions[0].seat_number == 'C4'
        assert [(c.concession_id, c.quantity) for c in with_concessions[0].concessions] == [
            (1, 2),
            (2, 1),
        ]
        assert sorted(r.seat_number for r in requests if not r.concessions) == ['B2', 'E7']

    @pytest.mark.asyncio
    async def test_every_write_carries_showtime_ticket_type_and_promotion(
        self,
        use_case: SubmitCheckoutUseCase,
        mock_booking_repo: AsyncMock,
        filled_session: CheckoutSession,
    ) -> None:
        await use_case.execute(session=filled_session)

        for request in _requests_sent(mock_booking_repo):
            assert request.showtime_id == 12
            assert request.ticket_type == 'adult'
            assert request.promotion_code == 'WEEKEND10'

    def test_build_requests__selection_order_and_no_promotion(
        self, use_case: SubmitCheckoutUseCase, checkout_session: CheckoutSession
    ) -> None:
        # Arrange
        for label in ('F1', 'A9'):
            checkout_session.toggle_seat(label)

        # Act
        requests = use_case.build_requests(checkout_session)

        # Assert
        assert [r.seat_number for r in requests] == ['F1', 'A9']
        assert all(r.promotion_code is None for r in requests)
        assert all(r.concessions == [] for r in requests)

    @pytest.mark.asyncio
    async def test_writes_are_concurrent(
        self,
        use_case: SubmitCheckoutUseCase,
        mock_booking_repo: AsyncMock,
        filled_session: CheckoutSession,
    ) -> None:
        # Arrange: each write waits until all three are in flight
        in_flight: list[str] = []
        all_in_flight = anyio.Event()

        async def create_booking(*, request: BookingRequest) -> BookingReceipt:
            in_flight.append(request.seat_number)
            if len(in_flight) == 3:
                all_in_flight.set()
            await all_in_flight.wait()
            return _receipt_for(request=request)

        mock_booking_repo.create_booking.side_effect = create_booking

        # Act
        with anyio.fail_after(2):
            result = await use_case.execute(session=filled_session)

        # Assert
        assert result.success
        assert len(result.receipts) == 3

    @pytest.mark.asyncio
    async def test_one_failure__reported_and_session_untouched(
        self,
        use_case: SubmitCheckoutUseCase,
        mock_booking_repo: AsyncMock,
        filled_session: CheckoutSession,
    ) -> None:
        # Arrange
        seats_before = list(filled_session.selected_seats)
        concessions_before = dict(filled_session.selected_concessions)
        promotion_before = filled_session.active_promotion

        async def create_booking(*, request: BookingRequest) -> BookingReceipt:
            if request.seat_number == 'B2':
                raise ApiRequestError(
                    'POST /bookings.php returned 409', 409, server_message='Seat B2 is taken'
                )
            return _receipt_for(request=request)

        mock_booking_repo.create_booking.side_effect = create_booking

        # Act
        result = await use_case.execute(session=filled_session)

        # Assert
        assert not result.success
        assert result.is_partial
        assert result.error_message == 'Seat B2 is taken'
        assert sorted(r.seat_number for r in result.receipts) == ['C4', 'E7']
        assert [f.seat_number for f in result.failures] == ['B2']
        assert filled_session.selected_seats == seats_before
        assert filled_session.selected_concessions == concessions_before
        assert filled_session.active_promotion == promotion_before

    @pytest.mark.asyncio
    async def test_failure_without_message__falls_back_to_default(
        self,
        use_case: SubmitCheckoutUseCase,
        mock_booking_repo: AsyncMock,
        checkout_session: CheckoutSession,
    ) -> None:
        checkout_session.toggle_seat('D4')
        mock_booking_repo.create_booking.side_effect = ApiRequestError('')

        result = await use_case.execute(session=checkout_session)

        assert result.error_message == DEFAULT_SUBMISSION_ERROR
        assert not result.is_partial

    @pytest.mark.asyncio
    async def test_no_seats__raises(
        self, use_case: SubmitCheckoutUseCase, checkout_session: CheckoutSession
    ) -> None:
        with pytest.raises(DomainError, match=NO_SEATS_SELECTED):
            await use_case.execute(session=checkout_session)

    def test_ticket_type_defaults_to_settings(self, mock_booking_repo: AsyncMock) -> None:
        use_case = SubmitCheckoutUseCase(booking_repo=mock_booking_repo)

        assert use_case.ticket_type == 'adult'
