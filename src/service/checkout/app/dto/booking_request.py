from decimal import Decimal
from typing import List, Optional

import attrs


@attrs.define(frozen=True)
class BookingConcessionLine:
    concession_id: int
    name: str
    price: Decimal
    quantity: int


@attrs.define(frozen=True)
class BookingRequest:
    """One create-booking write: a single seat of a checkout submission"""

    showtime_id: int
    seat_number: str
    ticket_type: str
    concessions: List[BookingConcessionLine] = attrs.field(factory=list)
    promotion_code: Optional[str] = None


@attrs.define(frozen=True)
class BookingReceipt:
    seat_number: str
    ticket_id: Optional[int] = None
    message: str = ''
