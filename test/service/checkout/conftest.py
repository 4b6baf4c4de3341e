"""
Checkout service fixtures

- Domain builders shared by unit and BDD tests
- Fake cinema backend + real ApiClient wired through httpx.ASGITransport
"""

from collections.abc import AsyncGenerator
from datetime import date, time
from decimal import Decimal

import httpx
import pytest

from fake_cinema_backend import FakeCinemaState, create_fake_cinema_app, default_state
from src.platform.config.core_setting import Settings
from src.platform.http.api_client import ApiClient
from src.service.checkout.domain.aggregate.checkout_session_aggregate import CheckoutSession
from src.service.checkout.domain.entity.concession_entity import ConcessionItem
from src.service.checkout.domain.entity.promotion_entity import Promotion
from src.service.checkout.domain.entity.showtime_entity import Showtime
from src.service.checkout.domain.entity.user_entity import AuthUser
from src.service.checkout.domain.enum.discount_type import DiscountType
from src.service.checkout.domain.value_object.seat_id import SeatId


# =============================================================================
# Domain fixtures
# =============================================================================
@pytest.fixture
def showtime() -> Showtime:
    return Showtime(
        id=12,
        movie_id=3,
        movie_title='Dune: Part Two',
        cinema_name='Downtown Cinema',
        screen_id=5,
        screen_number='2',
        screen_type='IMAX',
        show_date=date(2025, 1, 10),
        show_time=time(19, 30),
        price=Decimal('12.00'),
    )


@pytest.fixture
def popcorn() -> ConcessionItem:
    return ConcessionItem(id=1, name='Large Popcorn', category='popcorn', price=Decimal('5.50'))


@pytest.fixture
def soda() -> ConcessionItem:
    return ConcessionItem(id=2, name='Soda', category='drink', price=Decimal('3.00'))


@pytest.fixture
def combo() -> ConcessionItem:
    return ConcessionItem(id=4, name='Date Night Combo', category='combo', price=Decimal('15.00'))


@pytest.fixture
def percent_promotion() -> Promotion:
    return Promotion(
        id=1,
        code='WEEKEND10',
        title='Weekend Deal',
        discount_type=DiscountType.PERCENTAGE,
        discount_value=Decimal('10.00'),
    )


@pytest.fixture
def fixed_promotion() -> Promotion:
    return Promotion(
        id=2,
        code='FLAT8',
        title='Flat Eight',
        discount_type=DiscountType.FIXED,
        discount_value=Decimal('8.00'),
    )


@pytest.fixture
def occupied_seats() -> frozenset[SeatId]:
    return frozenset({SeatId.parse('A1'), SeatId.parse('A2')})


@pytest.fixture
def checkout_session(
    showtime: Showtime,
    occupied_seats: frozenset[SeatId],
    popcorn: ConcessionItem,
    soda: ConcessionItem,
    combo: ConcessionItem,
    percent_promotion: Promotion,
    fixed_promotion: Promotion,
) -> CheckoutSession:
    return CheckoutSession.start(
        showtime=showtime,
        occupied_seats=occupied_seats,
        concession_catalog=[popcorn, soda, combo],
        promotion_catalog=[percent_promotion, fixed_promotion],
    )


@pytest.fixture
def buyer() -> AuthUser:
    return AuthUser(id=7, name='Test Buyer', email='buyer@test.com')


# =============================================================================
# Fake backend fixtures
# =============================================================================
@pytest.fixture
def fake_cinema() -> FakeCinemaState:
    return default_state()


@pytest.fixture
def asgi_transport(fake_cinema: FakeCinemaState) -> httpx.ASGITransport:
    return httpx.ASGITransport(app=create_fake_cinema_app(fake_cinema))


@pytest.fixture
async def api_client(
    test_settings: Settings, asgi_transport: httpx.ASGITransport
) -> AsyncGenerator[ApiClient, None]:
    client = ApiClient(settings=test_settings, transport=asgi_transport)
    yield client
    await client.aclose()
