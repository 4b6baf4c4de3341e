from typing import List, Optional

import anyio
import attrs
from opentelemetry import trace

from src.platform.exception.exceptions import ApiRequestError, DomainError
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.dto.checkout_entry_result import CheckoutEntryResult
from src.service.checkout.app.dto.seat_occupancy import SeatOccupancy
from src.service.checkout.app.interface.i_concession_query_repo import IConcessionQueryRepo
from src.service.checkout.app.interface.i_promotion_query_repo import IPromotionQueryRepo
from src.service.checkout.app.interface.i_seat_occupancy_query_repo import (
    ISeatOccupancyQueryRepo,
)
from src.service.checkout.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.checkout.domain.aggregate.checkout_session_aggregate import CheckoutSession
from src.service.checkout.domain.entity.concession_entity import ConcessionItem
from src.service.checkout.domain.entity.promotion_entity import Promotion
from src.service.checkout.domain.entity.showtime_entity import Showtime


SHOWTIME_NOT_FOUND = 'Showtime not found'
LOAD_FAILED_PREFIX = 'Failed to load booking information: '


@attrs.define
class _EntryReads:
    showtime: Optional[Showtime] = None
    showtime_error: Optional[str] = None
    concessions: List[ConcessionItem] = attrs.field(factory=list)
    promotions: List[Promotion] = attrs.field(factory=list)
    occupancy: SeatOccupancy = attrs.field(factory=SeatOccupancy.empty)
    degraded: List[str] = attrs.field(factory=list)


class StartCheckoutUseCase:
    """
    Enter the checkout flow for one showtime.

    Flow:
    1. Fan out the four entry reads concurrently (showtime, concessions,
       promotions, seat occupancy) and join all of them
    2. Showtime missing or unreadable -> terminal error, no session
    3. Any other read failing -> that collection is empty, checkout continues
    4. Build a fresh CheckoutSession on step 1
    """

    def __init__(
        self,
        *,
        showtime_repo: IShowtimeQueryRepo,
        concession_repo: IConcessionQueryRepo,
        promotion_repo: IPromotionQueryRepo,
        seat_occupancy_repo: ISeatOccupancyQueryRepo,
    ) -> None:
        self.showtime_repo = showtime_repo
        self.concession_repo = concession_repo
        self.promotion_repo = promotion_repo
        self.seat_occupancy_repo = seat_occupancy_repo
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def execute(self, *, showtime_id: int) -> CheckoutEntryResult:
        with self.tracer.start_as_current_span(
            'use_case.start_checkout',
            attributes={'showtime.id': showtime_id},
        ):
            reads = _EntryReads()

            async with anyio.create_task_group() as tg:
                tg.start_soon(self._load_showtime, showtime_id, reads)
                tg.start_soon(self._load_concessions, reads)
                tg.start_soon(self._load_promotions, reads)
                tg.start_soon(self._load_occupancy, showtime_id, reads)

            if reads.showtime_error is not None:
                return CheckoutEntryResult(error_message=reads.showtime_error)
            if reads.showtime is None:
                return CheckoutEntryResult(error_message=SHOWTIME_NOT_FOUND)

            session = CheckoutSession.start(
                showtime=reads.showtime,
                occupied_seats=reads.occupancy.booked_seats,
                concession_catalog=reads.concessions,
                promotion_catalog=reads.promotions,
            )

            Logger.base.info(
                f'🎟️ [CHECKOUT] Session started for showtime {showtime_id}: '
                f'{len(reads.occupancy.booked_seats)} taken, '
                f'{len(reads.concessions)} concessions, {len(reads.promotions)} promotions'
                + (f', degraded={reads.degraded}' if reads.degraded else '')
            )
            return CheckoutEntryResult(session=session, degraded_sources=tuple(reads.degraded))

    async def _load_showtime(self, showtime_id: int, reads: _EntryReads) -> None:
        try:
            reads.showtime = await self.showtime_repo.get_by_id(showtime_id=showtime_id)
        except DomainError as e:
            reads.showtime_error = e.message
        except ApiRequestError as e:
            reads.showtime_error = f'{LOAD_FAILED_PREFIX}{e.user_message}'

    async def _load_concessions(self, reads: _EntryReads) -> None:
        try:
            reads.concessions = await self.concession_repo.list_concessions()
        except ApiRequestError as e:
            Logger.base.warning(f'⚠️ [CHECKOUT] Concessions unavailable, continuing without: {e}')
            reads.degraded.append('concessions')

    async def _load_promotions(self, reads: _EntryReads) -> None:
        try:
            reads.promotions = await self.promotion_repo.list_promotions()
        except ApiRequestError as e:
            Logger.base.warning(f'⚠️ [CHECKOUT] Promotions unavailable, continuing without: {e}')
            reads.degraded.append('promotions')

    async def _load_occupancy(self, showtime_id: int, reads: _EntryReads) -> None:
        try:
            occupancy = await self.seat_occupancy_repo.get_occupancy(showtime_id=showtime_id)
        except ApiRequestError as e:
            Logger.base.warning(f'⚠️ [CHECKOUT] Seat occupancy unavailable for {showtime_id}: {e}')
            reads.degraded.append('occupancy')
            return

        if not occupancy.success:
            Logger.base.warning(
                f'⚠️ [CHECKOUT] Seat occupancy for {showtime_id} reported success=false'
            )
            reads.degraded.append('occupancy')
            return

        reads.occupancy = occupancy
