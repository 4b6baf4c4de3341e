"""
BDD Step Definitions for the checkout flow

Drives a CheckoutController wired with the real use cases and httpx repos
against the in-process fake cinema backend.

Note: pytest-bdd steps must be synchronous, so async controller calls go
through asyncio.run().
"""

import asyncio
from collections.abc import Coroutine, Generator
from typing import Any, TypeVar

import httpx
import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from fake_cinema_backend import FakeCinemaState
from src.platform.config.core_setting import Settings
from src.platform.http.api_client import ApiClient
from src.service.checkout.app.command.start_checkout_use_case import StartCheckoutUseCase
from src.service.checkout.app.command.submit_checkout_use_case import SubmitCheckoutUseCase
from src.service.checkout.domain.entity.user_entity import AuthUser
from src.service.checkout.domain.enum.wizard_step import WizardStep
from src.service.checkout.domain.value_object.price_breakdown import format_money
from src.service.checkout.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.checkout.driven_adapter.repo.concession_query_repo_impl import (
    ConcessionQueryRepoImpl,
)
from src.service.checkout.driven_adapter.repo.promotion_query_repo_impl import (
    PromotionQueryRepoImpl,
)
from src.service.checkout.driven_adapter.repo.seat_occupancy_query_repo_impl import (
    SeatOccupancyQueryRepoImpl,
)
from src.service.checkout.driven_adapter.repo.showtime_query_repo_impl import (
    ShowtimeQueryRepoImpl,
)
from src.service.checkout.driven_adapter.session.auth_session_impl import AuthSession
from src.service.checkout.driven_adapter.session.navigator_impl import HistoryNavigator
from src.service.checkout.driven_adapter.session.theme_preference_impl import ThemePreference
from src.service.checkout.driving_adapter.checkout_controller import (
    CheckoutController,
    CheckoutStatus,
)


scenarios('checkout.feature')

pytestmark = pytest.mark.bdd


# =============================================================================
# Helper Functions
# =============================================================================
T = TypeVar('T')


def _run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run async coroutine in sync context."""
    return asyncio.run(coro)


def _split_seats(seats: str) -> list[str]:
    return [s.strip() for s in seats.split(',') if s.strip()]


# =============================================================================
# Fixtures
# =============================================================================
@pytest.fixture
def context() -> dict[str, Any]:
    """Shared test context for storing state between steps"""
    return {}


@pytest.fixture
def bdd_api_client(
    test_settings: Settings, asgi_transport: httpx.ASGITransport
) -> Generator[ApiClient, None, None]:
    client = ApiClient(settings=test_settings, transport=asgi_transport)
    yield client
    _run_async(client.aclose())


@pytest.fixture
def auth() -> AuthSession:
    return AuthSession()


@pytest.fixture
def navigator() -> HistoryNavigator:
    return HistoryNavigator()


@pytest.fixture
def controller(
    bdd_api_client: ApiClient, auth: AuthSession, navigator: HistoryNavigator
) -> CheckoutController:
    return CheckoutController(
        start_checkout_use_case=StartCheckoutUseCase(
            showtime_repo=ShowtimeQueryRepoImpl(api_client=bdd_api_client),
            concession_repo=ConcessionQueryRepoImpl(api_client=bdd_api_client),
            promotion_repo=PromotionQueryRepoImpl(api_client=bdd_api_client),
            seat_occupancy_repo=SeatOccupancyQueryRepoImpl(api_client=bdd_api_client),
        ),
        submit_checkout_use_case=SubmitCheckoutUseCase(
            booking_repo=BookingCommandRepoImpl(api_client=bdd_api_client),
            ticket_type='adult',
        ),
        auth_session=auth,
        navigator=navigator,
        theme=ThemePreference(),
    )


# =============================================================================
# Given Steps
# =============================================================================
@given(parsers.parse('the cinema backend has showtime {showtime_id:d} with seats "{seats}" booked'))
def backend_with_booked_seats(fake_cinema: FakeCinemaState, showtime_id: int, seats: str) -> None:
    fake_cinema.booked_seats[showtime_id] = set(_split_seats(seats))


@given('I am signed in')
def signed_in(auth: AuthSession) -> None:
    auth.login(AuthUser(id=7, name='Test Buyer', email='buyer@test.com'))


@given('I am signed out')
def signed_out(auth: AuthSession) -> None:
    auth.logout()


@given(parsers.parse('the "{endpoint}" service is down'))
def service_down(fake_cinema: FakeCinemaState, endpoint: str) -> None:
    fake_cinema.broken_endpoints.add(endpoint)


@given(parsers.parse('seat "{seat}" will be rejected by the backend'))
def seat_rejected(fake_cinema: FakeCinemaState, seat: str) -> None:
    fake_cinema.rejected_seats.add(seat)


# =============================================================================
# When Steps
# =============================================================================
@when(parsers.parse('I open checkout for showtime "{showtime_id}"'))
def open_checkout(controller: CheckoutController, showtime_id: str) -> None:
    _run_async(controller.enter_from_query({'showtime': showtime_id}))


@when('I open checkout without a showtime')
def open_checkout_without_showtime(controller: CheckoutController) -> None:
    _run_async(controller.enter_from_query({}))


@when(parsers.parse('I select seats "{seats}"'))
def select_seats(controller: CheckoutController, seats: str) -> None:
    for seat in _split_seats(seats):
        controller.toggle_seat(seat)


@when('I continue')
def continue_step(controller: CheckoutController, context: dict[str, Any]) -> None:
    context['continued'] = controller.continue_()


@when(parsers.parse('I add {quantity:d} x concession {concession_id:d}'))
def add_concession(controller: CheckoutController, quantity: int, concession_id: int) -> None:
    for _ in range(quantity):
        controller.add_concession(concession_id)


@when(parsers.parse('I apply promotion {promotion_id:d}'))
def apply_promotion(controller: CheckoutController, promotion_id: int) -> None:
    controller.select_promotion(promotion_id)


@when('I confirm the booking')
def confirm_booking(controller: CheckoutController, context: dict[str, Any]) -> None:
    context['result'] = _run_async(controller.confirm())


# =============================================================================
# Then Steps
# =============================================================================
@then(parsers.parse('the grand total should be "{amount}"'))
def grand_total_is(controller: CheckoutController, amount: str) -> None:
    assert format_money(controller.price_breakdown().grand_total) == amount


@then(parsers.parse('the confirm button should read "{label}"'))
def confirm_label_is(controller: CheckoutController, label: str) -> None:
    assert controller.confirm_label() == label


@then(parsers.parse('I should be taken to "{path}"'))
def navigated_to(navigator: HistoryNavigator, path: str) -> None:
    assert navigator.current_path == path


@then(parsers.parse('the backend should have {count:d} bookings'))
def backend_booking_count(fake_cinema: FakeCinemaState, count: int) -> None:
    assert len(fake_cinema.bookings) == count


@then(parsers.parse('only the booking for seat "{seat}" should carry concessions'))
def concessions_only_on(fake_cinema: FakeCinemaState, seat: str) -> None:
    carrying = [b['seat_number'] for b in fake_cinema.bookings if b['concessions']]
    assert carrying == [seat]


@then('no seats should be selected')
def no_seats_selected(controller: CheckoutController) -> None:
    assert controller.session is not None
    assert controller.session.selected_seats == []


@then('I cannot continue past seat selection')
def cannot_continue(controller: CheckoutController) -> None:
    assert controller.continue_() is False
    assert controller.step == WizardStep.SEAT_SELECTION


@then(parsers.parse('the checkout should be ready on step {step:d}'))
def ready_on_step(controller: CheckoutController, step: int) -> None:
    assert controller.status == CheckoutStatus.READY
    assert controller.step == WizardStep(step)


@then('the concession catalog should be empty')
def concession_catalog_empty(controller: CheckoutController) -> None:
    assert controller.session is not None
    assert controller.session.concession_catalog == ()
    assert 'concessions' in controller.degraded_sources


@then(parsers.parse('I should see the error "{message}"'))
def error_shown(controller: CheckoutController, message: str) -> None:
    assert controller.error_message == message


@then(parsers.parse('seats "{seats}" should still be selected'))
def seats_still_selected(controller: CheckoutController, seats: str) -> None:
    assert controller.session is not None
    assert [s.label for s in controller.session.selected_seats] == _split_seats(seats)
