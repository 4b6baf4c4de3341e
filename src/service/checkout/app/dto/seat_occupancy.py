import attrs

from src.service.checkout.domain.value_object.seat_id import SeatId


@attrs.define(frozen=True)
class SeatOccupancy:
    """
    Seats already booked for a showtime at query time.

    success mirrors the backend's own flag; a snapshot with success=False
    must not be trusted and is treated as empty by the checkout entry.
    """

    booked_seats: frozenset[SeatId] = attrs.field(factory=frozenset, converter=frozenset)
    success: bool = True

    @classmethod
    def empty(cls) -> 'SeatOccupancy':
        return cls(booked_seats=frozenset(), success=True)
