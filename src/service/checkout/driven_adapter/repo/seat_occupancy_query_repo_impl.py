from src.platform.constant.route_constant import SEAT_OCCUPANCY_GET
from src.platform.http.api_client import ApiClient, decode_response
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.dto.seat_occupancy import SeatOccupancy
from src.service.checkout.app.interface.i_seat_occupancy_query_repo import (
    ISeatOccupancyQueryRepo,
)
from src.service.checkout.domain.value_object.seat_id import SeatId
from src.service.checkout.driven_adapter.schema.cinema_api_schema import SeatOccupancyResponse


class SeatOccupancyQueryRepoImpl(ISeatOccupancyQueryRepo):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def get_occupancy(self, *, showtime_id: int) -> SeatOccupancy:
        response = await self.api_client.get(
            SEAT_OCCUPANCY_GET, params={'showtime_id': showtime_id}
        )
        payload: SeatOccupancyResponse = decode_response(response, SeatOccupancyResponse)

        booked: set[SeatId] = set()
        for label in payload.booked_seats:
            if SeatId.is_valid(label):
                booked.add(SeatId.parse(label))
            else:
                # Screens larger than the client grid report seats we cannot render
                Logger.base.warning(
                    f'⚠️ [SEATS] Ignoring booked seat {label!r} outside the grid '
                    f'(showtime {showtime_id})'
                )

        return SeatOccupancy(booked_seats=frozenset(booked), success=payload.success)
