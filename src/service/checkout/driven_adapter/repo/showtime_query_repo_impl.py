from typing import Optional

from src.platform.constant.route_constant import SHOWTIME_GET
from src.platform.exception.exceptions import ApiRequestError, DomainError
from src.platform.http.api_client import ApiClient, decode_response
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.interface.i_showtime_query_repo import IShowtimeQueryRepo
from src.service.checkout.domain.entity.showtime_entity import Showtime
from src.service.checkout.driven_adapter.schema.cinema_api_schema import ShowtimeResponse


INVALID_SHOWTIME_DATA = 'Invalid showtime data'


class ShowtimeQueryRepoImpl(IShowtimeQueryRepo):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def get_by_id(self, *, showtime_id: int) -> Optional[Showtime]:
        try:
            response = await self.api_client.get(SHOWTIME_GET, params={'id': showtime_id})
        except ApiRequestError as e:
            if e.status_code == 404:
                return None
            raise

        # An empty body / JSON null also means "no such showtime"
        if not response.content.strip() or response.content.strip() == b'null':
            return None

        payload: ShowtimeResponse = decode_response(response, ShowtimeResponse)
        if payload.showtime_id is None:
            raise DomainError(INVALID_SHOWTIME_DATA)

        return Showtime(
            id=payload.showtime_id,
            movie_id=payload.movie_id,
            movie_title=payload.title,
            cinema_name=payload.cinema_name,
            screen_id=payload.screen_id,
            screen_number=(
                str(payload.screen_number) if payload.screen_number is not None else None
            ),
            screen_type=payload.screen_type,
            show_date=payload.show_date,
            show_time=payload.show_time,
            price=payload.price,
        )
