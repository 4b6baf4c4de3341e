"""
Read-side projections of a checkout session for rendering the wizard.

Pure functions over the aggregate: nothing here mutates state or talks to
the backend.
"""

from typing import Dict, List, Sequence

import attrs

from src.service.checkout.domain.aggregate.checkout_session_aggregate import CheckoutSession
from src.service.checkout.domain.entity.concession_entity import ConcessionItem
from src.service.checkout.domain.enum.concession_category import ConcessionCategory
from src.service.checkout.domain.enum.seat_state import SeatState
from src.service.checkout.domain.enum.wizard_step import WizardStep
from src.service.checkout.domain.value_object.seat_id import SEAT_ROWS, SeatId, iter_seat_grid


@attrs.define(frozen=True)
class SeatCell:
    seat: SeatId
    state: SeatState

    @property
    def title(self) -> str:
        return f'Seat {self.seat} - {self.state.value.capitalize()}'


@attrs.define(frozen=True)
class StepProgress:
    step: WizardStep
    label: str
    active: bool
    completed: bool


STEP_LABELS: Dict[WizardStep, str] = {
    WizardStep.SEAT_SELECTION: 'Select Seats',
    WizardStep.CONCESSIONS: 'Add Concessions',
    WizardStep.CONFIRMATION: 'Confirm & Pay',
}


def build_seat_map(session: CheckoutSession) -> Dict[str, List[SeatCell]]:
    """Rows A-F in order, each holding its ten seats with their current state"""
    seat_map: Dict[str, List[SeatCell]] = {row: [] for row in SEAT_ROWS}
    for seat in iter_seat_grid():
        seat_map[seat.row].append(SeatCell(seat=seat, state=session.seat_state(seat)))
    return seat_map


def group_concessions_by_category(
    catalog: Sequence[ConcessionItem],
) -> Dict[ConcessionCategory, List[ConcessionItem]]:
    """Known categories in display order; items of unknown categories are left out"""
    groups: Dict[ConcessionCategory, List[ConcessionItem]] = {
        category: [] for category in ConcessionCategory
    }
    for item in catalog:
        category = item.known_category
        if category is not None:
            groups[category].append(item)
    return groups


def build_progress(current: WizardStep) -> List[StepProgress]:
    return [
        StepProgress(
            step=step,
            label=STEP_LABELS[step],
            active=step <= current,
            completed=step < current,
        )
        for step in WizardStep
    ]


def continue_label(seat_count: int) -> str:
    noun = 'seat' if seat_count == 1 else 'seats'
    return f'Continue to Concessions ({seat_count} {noun})'
