"""
Wire schemas of the cinema backend.

The backend serializes SQL rows as-is, so numeric columns frequently arrive
as strings ("12.00", "7"); pydantic's lax mode coerces them.
"""

from datetime import date, time
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ShowtimeResponse(BaseModel):
    model_config = ConfigDict(
        extra='ignore',
        json_schema_extra={
            'example': {
                'showtime_id': 12,
                'movie_id': 3,
                'screen_id': 5,
                'show_date': '2025-01-10',
                'show_time': '19:30:00',
                'price': '12.00',
                'title': 'Dune: Part Two',
                'cinema_name': 'Downtown Cinema',
                'screen_number': '2',
                'screen_type': 'IMAX',
            }
        },
    )

    showtime_id: Optional[int] = None
    movie_id: Optional[int] = None
    screen_id: int
    show_date: date
    show_time: time
    price: Decimal
    title: str
    cinema_name: str
    screen_number: Optional[int | str] = None
    screen_type: Optional[str] = None


class ConcessionResponse(BaseModel):
    model_config = ConfigDict(extra='ignore')

    concession_id: int
    name: str
    category: str
    description: Optional[str] = None
    price: Decimal
    image_url: Optional[str] = None
    is_available: bool = True


class PromotionResponse(BaseModel):
    model_config = ConfigDict(extra='ignore')

    promotion_id: int
    title: str
    code: str
    description: Optional[str] = None
    discount_type: Literal['percentage', 'fixed']
    discount_value: Decimal


class SeatOccupancyResponse(BaseModel):
    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    success: bool = False
    booked_seats: List[str] = Field(default_factory=list, alias='bookedSeats')


class BookingConcessionPayload(BaseModel):
    concession_id: int
    name: str
    price: Decimal
    quantity: int


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'showtime_id': 12,
                'seat_number': 'C7',
                'ticket_type': 'adult',
                'concessions': [
                    {'concession_id': 4, 'name': 'Large Popcorn', 'price': '5.50', 'quantity': 2}
                ],
                'promotion_code': 'WEEKEND10',
            }
        }
    )

    showtime_id: int
    seat_number: str
    ticket_type: str
    concessions: List[BookingConcessionPayload] = []
    promotion_code: Optional[str] = None


class BookingCreateResponse(BaseModel):
    model_config = ConfigDict(extra='ignore')

    success: bool = True
    message: str = ''
    ticket_id: Optional[int] = None


class PingResponse(BaseModel):
    model_config = ConfigDict(extra='ignore')

    status: str = 'inactive'
