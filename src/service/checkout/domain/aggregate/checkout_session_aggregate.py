"""
Checkout Session Aggregate - working state of one in-progress booking attempt

[Business Invariants]
- A selected seat is never taken: selected seats ⊆ grid − occupancy
- Selected concessions are keyed by concession id and always have quantity >= 1
- Zero or one promotion is active
- The wizard advances past seat selection only with at least one seat selected;
  moving backward is always allowed and keeps every selection
- Totals are derived from the current state on every read, never cached

The session is never persisted. It lives as long as the controller keeps it
and is dropped on navigation away or after a successful submission.
"""

from decimal import Decimal
from typing import Iterable, Optional

import attrs

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.checkout.domain.entity.concession_entity import (
    ConcessionItem,
    SelectedConcession,
)
from src.service.checkout.domain.entity.promotion_entity import Promotion
from src.service.checkout.domain.entity.showtime_entity import Showtime
from src.service.checkout.domain.enum.seat_state import SeatState
from src.service.checkout.domain.enum.wizard_step import WizardStep
from src.service.checkout.domain.value_object.price_breakdown import PriceBreakdown
from src.service.checkout.domain.value_object.seat_id import SeatId


@attrs.define
class CheckoutSession:
    showtime: Showtime
    occupied_seats: frozenset[SeatId] = attrs.field(factory=frozenset, converter=frozenset)
    concession_catalog: tuple[ConcessionItem, ...] = attrs.field(factory=tuple, converter=tuple)
    promotion_catalog: tuple[Promotion, ...] = attrs.field(factory=tuple, converter=tuple)

    # Working set (mutated only through the actions below)
    selected_seats: list[SeatId] = attrs.field(factory=list)
    selected_concessions: dict[int, SelectedConcession] = attrs.field(factory=dict)
    active_promotion: Optional[Promotion] = None
    step: WizardStep = WizardStep.SEAT_SELECTION

    @classmethod
    @Logger.io
    def start(
        cls,
        *,
        showtime: Showtime,
        occupied_seats: Iterable[SeatId] = (),
        concession_catalog: Iterable[ConcessionItem] = (),
        promotion_catalog: Iterable[Promotion] = (),
    ) -> 'CheckoutSession':
        return cls(
            showtime=showtime,
            occupied_seats=frozenset(occupied_seats),
            concession_catalog=tuple(concession_catalog),
            promotion_catalog=tuple(promotion_catalog),
        )

    # ------------------------------------------------------------------ seats

    def seat_state(self, seat: SeatId | str) -> SeatState:
        seat_id = SeatId.parse(seat)
        if seat_id in self.occupied_seats:
            return SeatState.TAKEN
        if seat_id in self.selected_seats:
            return SeatState.SELECTED
        return SeatState.AVAILABLE

    @Logger.io
    def toggle_seat(self, seat: SeatId | str) -> SeatState:
        """
        Select an available seat or release a selected one.

        Taken seats are ignored. There is no upper bound on how many seats can
        be selected.

        Returns:
            The seat's state after the toggle
        """
        seat_id = SeatId.parse(seat)
        if seat_id in self.occupied_seats:
            return SeatState.TAKEN

        if seat_id in self.selected_seats:
            self.selected_seats.remove(seat_id)
            return SeatState.AVAILABLE

        self.selected_seats.append(seat_id)
        return SeatState.SELECTED

    @property
    def seat_count(self) -> int:
        return len(self.selected_seats)

    @property
    def has_selected_seats(self) -> bool:
        return bool(self.selected_seats)

    # ------------------------------------------------------------ concessions

    def find_concession(self, concession_id: int) -> ConcessionItem:
        for item in self.concession_catalog:
            if item.id == concession_id:
                return item
        raise NotFoundError(f'Concession {concession_id} not found')

    @Logger.io
    def add_concession(self, item: ConcessionItem | int) -> SelectedConcession:
        if not isinstance(item, ConcessionItem):
            item = self.find_concession(item)

        existing = self.selected_concessions.get(item.id)
        entry = existing.incremented() if existing else SelectedConcession(item=item)
        self.selected_concessions[item.id] = entry
        return entry

    @Logger.io
    def remove_concession(self, concession_id: int) -> Optional[SelectedConcession]:
        """
        Decrement a selected concession, deleting it when its quantity would hit zero.

        Returns:
            The remaining entry, or None when the entry is gone (or never existed)
        """
        existing = self.selected_concessions.get(concession_id)
        if existing is None:
            return None

        if existing.quantity > 1:
            entry = existing.decremented()
            self.selected_concessions[concession_id] = entry
            return entry

        del self.selected_concessions[concession_id]
        return None

    @property
    def concession_lines(self) -> list[SelectedConcession]:
        return list(self.selected_concessions.values())

    # ------------------------------------------------------------- promotion

    @Logger.io
    def select_promotion(self, promotion_id: Optional[int]) -> Optional[Promotion]:
        """Replace the active promotion. Ids missing from the catalog clear it."""
        self.active_promotion = next(
            (promo for promo in self.promotion_catalog if promo.id == promotion_id),
            None,
        )
        return self.active_promotion

    # ----------------------------------------------------------------- steps

    @Logger.io
    def continue_(self) -> bool:
        """
        Advance one step.

        Returns:
            False when the transition is rejected (no seats on step 1) or there
            is no further step
        """
        if self.step == WizardStep.SEAT_SELECTION:
            if not self.has_selected_seats:
                return False
            self.step = WizardStep.CONCESSIONS
            return True

        if self.step == WizardStep.CONCESSIONS:
            self.step = WizardStep.CONFIRMATION
            return True

        return False

    @Logger.io
    def back(self) -> bool:
        if self.step == WizardStep.SEAT_SELECTION:
            return False
        self.step = WizardStep(self.step - 1)
        return True

    # ---------------------------------------------------------------- totals

    def price_breakdown(self) -> PriceBreakdown:
        ticket_subtotal = self.showtime.price * self.seat_count
        concession_subtotal = sum(
            (line.line_total for line in self.selected_concessions.values()), Decimal(0)
        )
        subtotal = ticket_subtotal + concession_subtotal
        discount = (
            self.active_promotion.discount_for(subtotal) if self.active_promotion else Decimal(0)
        )
        return PriceBreakdown(
            ticket_subtotal=ticket_subtotal,
            concession_subtotal=concession_subtotal,
            discount=discount,
        )
