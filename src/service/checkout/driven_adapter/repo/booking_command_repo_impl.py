from src.platform.constant.route_constant import BOOKING_CREATE
from src.platform.exception.exceptions import ApiRequestError
from src.platform.http.api_client import ApiClient, decode_response
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.dto.booking_request import BookingReceipt, BookingRequest
from src.service.checkout.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.checkout.driven_adapter.schema.cinema_api_schema import (
    BookingConcessionPayload,
    BookingCreateRequest,
    BookingCreateResponse,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @staticmethod
    def to_payload(request: BookingRequest) -> dict:
        body = BookingCreateRequest(
            showtime_id=request.showtime_id,
            seat_number=request.seat_number,
            ticket_type=request.ticket_type,
            concessions=[
                BookingConcessionPayload(
                    concession_id=line.concession_id,
                    name=line.name,
                    price=line.price,
                    quantity=line.quantity,
                )
                for line in request.concessions
            ],
            promotion_code=request.promotion_code,
        )
        return body.model_dump(mode='json')

    @Logger.io
    async def create_booking(self, *, request: BookingRequest) -> BookingReceipt:
        response = await self.api_client.post_json(
            BOOKING_CREATE, payload=self.to_payload(request)
        )
        payload: BookingCreateResponse = decode_response(response, BookingCreateResponse)

        # 2xx with success=false still means the seat was not booked
        if not payload.success:
            raise ApiRequestError(
                f'Booking for seat {request.seat_number} rejected',
                response.status_code,
                server_message=payload.message or None,
            )

        return BookingReceipt(
            seat_number=request.seat_number,
            ticket_id=payload.ticket_id,
            message=payload.message,
        )
