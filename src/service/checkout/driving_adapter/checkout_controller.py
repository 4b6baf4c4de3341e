"""
Checkout Session Controller

Drives the three-step booking wizard for one showtime:

    1. Seat selection  ->  2. Concessions  ->  3. Confirm & pay

The controller owns the CheckoutSession for the lifetime of one checkout,
turns user actions into aggregate calls, and turns backend outcomes into
user-facing state (status, error banner, busy flag, navigation). Auth,
theme and routing are injected collaborators, so the controller runs
without any UI toolkit.
"""

from enum import StrEnum
from typing import Dict, List, Mapping, Optional

from src.platform.constant.route_constant import (
    PAGE_BOOKINGS_SUCCESS,
    PAGE_LOGIN,
    PAGE_SHOWTIMES,
)
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.command.start_checkout_use_case import (
    SHOWTIME_NOT_FOUND,
    StartCheckoutUseCase,
)
from src.service.checkout.app.command.submit_checkout_use_case import (
    NO_SEATS_SELECTED,
    SubmitCheckoutUseCase,
)
from src.service.checkout.app.dto.submission_result import SubmissionResult
from src.service.checkout.app.interface.i_auth_session import IAuthSession
from src.service.checkout.app.interface.i_navigator import INavigator
from src.service.checkout.app.interface.i_theme_accessor import IThemeAccessor
from src.service.checkout.app.query.checkout_view_query import (
    SeatCell,
    StepProgress,
    build_progress,
    build_seat_map,
    continue_label,
    group_concessions_by_category,
)
from src.service.checkout.domain.aggregate.checkout_session_aggregate import CheckoutSession
from src.service.checkout.domain.entity.concession_entity import (
    ConcessionItem,
    SelectedConcession,
)
from src.service.checkout.domain.entity.promotion_entity import Promotion
from src.service.checkout.domain.enum.concession_category import ConcessionCategory
from src.service.checkout.domain.enum.seat_state import SeatState
from src.service.checkout.domain.enum.wizard_step import WizardStep
from src.service.checkout.domain.value_object.price_breakdown import PriceBreakdown, format_money
from src.service.checkout.domain.value_object.seat_id import SeatId


SHOWTIME_QUERY_PARAM = 'showtime'
SHOWTIME_MISSING = 'Showtime information is missing'
NO_ACTIVE_SESSION = 'No active checkout session'


class CheckoutStatus(StrEnum):
    IDLE = 'idle'
    LOADING = 'loading'
    READY = 'ready'
    ERROR = 'error'  # terminal: only navigating away is possible
    REDIRECTED = 'redirected'
    COMPLETED = 'completed'


class CheckoutController:
    def __init__(
        self,
        *,
        start_checkout_use_case: StartCheckoutUseCase,
        submit_checkout_use_case: SubmitCheckoutUseCase,
        auth_session: IAuthSession,
        navigator: INavigator,
        theme: IThemeAccessor,
    ) -> None:
        self.start_checkout_use_case = start_checkout_use_case
        self.submit_checkout_use_case = submit_checkout_use_case
        self.auth_session = auth_session
        self.navigator = navigator
        self.theme = theme

        self.status = CheckoutStatus.IDLE
        self.session: Optional[CheckoutSession] = None
        self.error_message: Optional[str] = None
        self.is_submitting = False
        self.last_submission: Optional[SubmissionResult] = None
        self.degraded_sources: tuple[str, ...] = ()
        self._visit = 0

    # ------------------------------------------------------------------ entry

    async def enter_from_query(self, query: Mapping[str, str]) -> CheckoutStatus:
        return await self.enter(query.get(SHOWTIME_QUERY_PARAM))

    @Logger.io
    async def enter(self, showtime_id: str | int | None) -> CheckoutStatus:
        self._reset()

        if showtime_id is None or not str(showtime_id).strip():
            self.navigator.navigate(PAGE_SHOWTIMES)
            self.status = CheckoutStatus.REDIRECTED
            return self.status

        try:
            parsed_id = int(str(showtime_id).strip())
        except ValueError:
            return self._fail_entry(SHOWTIME_NOT_FOUND)

        self.status = CheckoutStatus.LOADING
        result = await self.start_checkout_use_case.execute(showtime_id=parsed_id)
        if not result.ok:
            return self._fail_entry(result.error_message or SHOWTIME_NOT_FOUND)

        self.session = result.session
        self.degraded_sources = result.degraded_sources
        self.status = CheckoutStatus.READY
        return self.status

    def leave(self) -> None:
        """Navigating away drops the session; in-flight requests are not cancelled."""
        self._reset()

    # ----------------------------------------------------------- user actions

    def toggle_seat(self, seat: SeatId | str) -> SeatState:
        return self._require_session().toggle_seat(seat)

    def add_concession(self, item: ConcessionItem | int) -> SelectedConcession:
        return self._require_session().add_concession(item)

    def remove_concession(self, concession_id: int) -> Optional[SelectedConcession]:
        return self._require_session().remove_concession(concession_id)

    def select_promotion(self, promotion_id: Optional[int]) -> Optional[Promotion]:
        return self._require_session().select_promotion(promotion_id)

    def continue_(self) -> bool:
        return self._require_session().continue_()

    def back(self) -> bool:
        return self._require_session().back()

    # ------------------------------------------------------------- submission

    @Logger.io
    async def confirm(self) -> Optional[SubmissionResult]:
        """
        Confirm & pay.

        Returns:
            The joined submission result, or None when nothing was submitted
            (already submitting, redirected to login, or a precondition failed)
        """
        if self.is_submitting:
            Logger.base.warning('⏳ [CHECKOUT] Submission already in flight, ignoring confirm')
            return None

        user = self.auth_session.current_user
        if user is None:
            # No resume-after-login: the session is dropped with the redirect
            self._reset()
            self.navigator.navigate(PAGE_LOGIN)
            self.status = CheckoutStatus.REDIRECTED
            return None

        if self.session is None:
            self.error_message = SHOWTIME_MISSING
            return None

        if not self.session.has_selected_seats:
            self.error_message = NO_SEATS_SELECTED
            return None

        visit = self._visit
        self.is_submitting = True
        self.error_message = None
        try:
            Logger.base.info(
                f'💳 [CHECKOUT] User {user.id} confirming {self.session.seat_count} seats '
                f'for showtime {self.session.showtime.id}'
            )
            result = await self.submit_checkout_use_case.execute(session=self.session)
        finally:
            if visit == self._visit:
                self.is_submitting = False

        if visit != self._visit:
            # Checkout was left or re-entered while the bookings were in flight
            Logger.base.warning(
                f'🚫 [CHECKOUT] Dropping superseded submission result '
                f'({len(result.receipts)} booked, {len(result.failures)} failed)'
            )
            return result

        self.last_submission = result
        if not result.success:
            # Keep the session untouched so the user can retry
            self.error_message = result.error_message
            return result

        self.session = None
        self.status = CheckoutStatus.COMPLETED
        self.navigator.navigate(PAGE_BOOKINGS_SUCCESS)
        return result

    # ------------------------------------------------------------ projections

    @property
    def step(self) -> Optional[WizardStep]:
        return self.session.step if self.session else None

    @property
    def is_loading(self) -> bool:
        return self.status == CheckoutStatus.LOADING

    @property
    def can_continue(self) -> bool:
        if self.session is None:
            return False
        if self.session.step == WizardStep.SEAT_SELECTION:
            return self.session.has_selected_seats
        return self.session.step == WizardStep.CONCESSIONS

    def price_breakdown(self) -> PriceBreakdown:
        return self._require_session().price_breakdown()

    def seat_map(self) -> Dict[str, List[SeatCell]]:
        return build_seat_map(self._require_session())

    def concessions_by_category(self) -> Dict[ConcessionCategory, List[ConcessionItem]]:
        return group_concessions_by_category(self._require_session().concession_catalog)

    def promotion_options(self) -> List[tuple[int, str]]:
        return [(promo.id, promo.label) for promo in self._require_session().promotion_catalog]

    def progress(self) -> List[StepProgress]:
        return build_progress(self._require_session().step)

    def continue_label(self) -> str:
        return continue_label(self._require_session().seat_count)

    def confirm_label(self) -> str:
        if self.is_submitting:
            return 'Processing...'
        return f'Confirm & Pay {format_money(self.price_breakdown().grand_total)}'

    # ---------------------------------------------------------------- helpers

    def _require_session(self) -> CheckoutSession:
        if self.session is None:
            raise DomainError(NO_ACTIVE_SESSION)
        return self.session

    def _fail_entry(self, message: str) -> CheckoutStatus:
        self.session = None
        self.error_message = message
        self.status = CheckoutStatus.ERROR
        return self.status

    def _reset(self) -> None:
        # Any submission still awaiting belongs to the previous visit
        self._visit += 1
        self.is_submitting = False
        self.status = CheckoutStatus.IDLE
        self.session = None
        self.error_message = None
        self.last_submission = None
        self.degraded_sources = ()
