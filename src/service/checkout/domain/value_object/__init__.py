"""Checkout Domain Value Objects"""

from src.service.checkout.domain.value_object.price_breakdown import PriceBreakdown, format_money
from src.service.checkout.domain.value_object.seat_id import (
    SEAT_GRID,
    SEAT_ROWS,
    SEATS_PER_ROW,
    SeatId,
    iter_seat_grid,
)

__all__ = [
    'SEAT_GRID',
    'SEAT_ROWS',
    'SEATS_PER_ROW',
    'PriceBreakdown',
    'SeatId',
    'format_money',
    'iter_seat_grid',
]
