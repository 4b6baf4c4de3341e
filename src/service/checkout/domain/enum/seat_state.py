from enum import StrEnum


class SeatState(StrEnum):
    """Mutually exclusive state of one seat within a checkout session"""

    AVAILABLE = 'available'
    SELECTED = 'selected'
    TAKEN = 'taken'
