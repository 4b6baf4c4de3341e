from datetime import date, time
from decimal import Decimal
from typing import Optional

import attrs


@attrs.define(frozen=True)
class Showtime:
    """One scheduled screening; fetched once per checkout and never mutated"""

    id: int
    movie_title: str
    cinema_name: str
    screen_id: int
    show_date: date
    show_time: time
    price: Decimal
    movie_id: Optional[int] = None
    screen_number: Optional[str] = None
    screen_type: Optional[str] = None
