"""
Seat Id Value Object

Every showtime uses the same static 6 x 10 grid (rows A-F, seats 1-10).
Only occupancy is fetched from the backend; the grid itself is enumerated here.
"""

import re
from typing import Iterator

import attrs

from src.platform.exception.exceptions import DomainError


SEAT_ROWS: tuple[str, ...] = ('A', 'B', 'C', 'D', 'E', 'F')
SEATS_PER_ROW = 10

_SEAT_LABEL_PATTERN = re.compile(r'^([A-Z])(\d{1,2})$')


@attrs.define(frozen=True, order=True)
class SeatId:
    """Seat identifier (Value Object), rendered as `<Row><Number>` e.g. `C7`"""

    row: str
    number: int

    def __attrs_post_init__(self) -> None:
        if self.row not in SEAT_ROWS or not 1 <= self.number <= SEATS_PER_ROW:
            raise DomainError(
                f'Seat {self.row}{self.number} is outside the {SEAT_ROWS[0]}1-'
                f'{SEAT_ROWS[-1]}{SEATS_PER_ROW} grid'
            )

    @property
    def label(self) -> str:
        return f'{self.row}{self.number}'

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, value: 'str | SeatId') -> 'SeatId':
        if isinstance(value, SeatId):
            return value
        match = _SEAT_LABEL_PATTERN.match(value.strip().upper()) if isinstance(value, str) else None
        if not match:
            raise DomainError(f'Invalid seat id format: {value!r}. Expected: <Row><Number> (e.g. A1)')
        return cls(row=match.group(1), number=int(match.group(2)))

    @classmethod
    def is_valid(cls, value: str) -> bool:
        try:
            cls.parse(value)
        except DomainError:
            return False
        return True


def iter_seat_grid() -> Iterator[SeatId]:
    """All seats in row-major order: A1..A10, B1..B10, ..., F10"""
    for row in SEAT_ROWS:
        for number in range(1, SEATS_PER_ROW + 1):
            yield SeatId(row=row, number=number)


SEAT_GRID: tuple[SeatId, ...] = tuple(iter_seat_grid())
