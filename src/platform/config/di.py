"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.http.api_client import ApiClient
from src.platform.observability.tracing import TracingConfig
from src.service.checkout.app.command.start_checkout_use_case import StartCheckoutUseCase
from src.service.checkout.app.command.submit_checkout_use_case import SubmitCheckoutUseCase
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
from src.service.checkout.driven_adapter.repo.session_ping_repo_impl import SessionPingRepoImpl
from src.service.checkout.driven_adapter.repo.showtime_query_repo_impl import (
    ShowtimeQueryRepoImpl,
)
from src.service.checkout.driven_adapter.session.auth_session_impl import AuthSession
from src.service.checkout.driven_adapter.session.navigator_impl import HistoryNavigator
from src.service.checkout.driven_adapter.session.session_keep_alive import SessionKeepAlive
from src.service.checkout.driven_adapter.session.theme_preference_impl import ThemePreference
from src.service.checkout.driving_adapter.checkout_controller import CheckoutController


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Observability
    tracing = providers.Singleton(TracingConfig)

    # Shared HTTP client (tests override `http_transport` with an ASGI/Mock transport)
    http_transport = providers.Object(None)
    api_client = providers.Singleton(
        ApiClient,
        settings=config_service,
        transport=http_transport,
    )

    # Repositories (stateless - share the api client)
    showtime_query_repo = providers.Singleton(ShowtimeQueryRepoImpl, api_client=api_client)
    concession_query_repo = providers.Singleton(ConcessionQueryRepoImpl, api_client=api_client)
    promotion_query_repo = providers.Singleton(PromotionQueryRepoImpl, api_client=api_client)
    seat_occupancy_query_repo = providers.Singleton(
        SeatOccupancyQueryRepoImpl, api_client=api_client
    )
    booking_command_repo = providers.Singleton(BookingCommandRepoImpl, api_client=api_client)
    session_ping_repo = providers.Singleton(SessionPingRepoImpl, api_client=api_client)

    # Client-wide state (one per running client)
    auth_session = providers.Singleton(AuthSession, ping_repo=session_ping_repo)
    theme = providers.Singleton(ThemePreference, initial=config_service.provided.DEFAULT_THEME)
    navigator = providers.Singleton(HistoryNavigator)
    keep_alive = providers.Singleton(
        SessionKeepAlive,
        ping_repo=session_ping_repo,
        interval=config_service.provided.KEEP_ALIVE_INTERVAL_SECONDS,
    )

    # Use cases
    start_checkout_use_case = providers.Factory(
        StartCheckoutUseCase,
        showtime_repo=showtime_query_repo,
        concession_repo=concession_query_repo,
        promotion_repo=promotion_query_repo,
        seat_occupancy_repo=seat_occupancy_query_repo,
    )
    submit_checkout_use_case = providers.Factory(
        SubmitCheckoutUseCase,
        booking_repo=booking_command_repo,
        ticket_type=config_service.provided.DEFAULT_TICKET_TYPE,
    )

    # One controller per checkout page visit
    checkout_controller = providers.Factory(
        CheckoutController,
        start_checkout_use_case=start_checkout_use_case,
        submit_checkout_use_case=submit_checkout_use_case,
        auth_session=auth_session,
        navigator=navigator,
        theme=theme,
    )


container = Container()


def setup() -> None:
    container.config_service()
    tracing = container.tracing()
    tracing.setup()
    tracing.instrument_httpx(client=container.api_client().client)


async def cleanup() -> None:
    container.keep_alive().stop()
    await container.api_client().aclose()
    container.tracing().shutdown()
    container.reset_singletons()
