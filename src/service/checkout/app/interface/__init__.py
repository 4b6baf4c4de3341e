"""Application layer interfaces (Ports)"""

from src.service.checkout.app.interface.i_auth_session import IAuthSession
from src.service.checkout.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.checkout.app.interface.i_concession_query_repo import IConcessionQueryRepo
from src.service.checkout.app.interface.i_navigator import INavigator
from src.service.checkout.app.interface.i_promotion_query_repo import IPromotionQueryRepo
from src.service.checkout.app.interface.i_seat_occupancy_query_repo import (
    ISeatOccupancyQueryRepo,
)
from src.service.checkout.app.interface.i_session_ping_repo import ISessionPingRepo
from src.service.checkout.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.checkout.app.interface.i_theme_accessor import IThemeAccessor

__all__ = [
    'IAuthSession',
    'IBookingCommandRepo',
    'IConcessionQueryRepo',
    'INavigator',
    'IPromotionQueryRepo',
    'ISeatOccupancyQueryRepo',
    'ISessionPingRepo',
    'IShowtimeQueryRepo',
    'IThemeAccessor',
]
