from src.platform.constant.route_constant import SESSION_PING
from src.platform.exception.exceptions import ApiRequestError
from src.platform.http.api_client import ApiClient, decode_response
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.interface.i_session_ping_repo import ISessionPingRepo
from src.service.checkout.driven_adapter.schema.cinema_api_schema import PingResponse


class SessionPingRepoImpl(ISessionPingRepo):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io
    async def ping(self) -> bool:
        try:
            response = await self.api_client.get(SESSION_PING)
        except ApiRequestError as e:
            if e.status_code == 401:
                return False
            raise

        payload: PingResponse = decode_response(response, PingResponse)
        return payload.status == 'active'
