from typing import List

from src.platform.constant.route_constant import CONCESSION_LIST
from src.platform.http.api_client import ApiClient, decode_response
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.interface.i_concession_query_repo import IConcessionQueryRepo
from src.service.checkout.domain.entity.concession_entity import ConcessionItem
from src.service.checkout.driven_adapter.schema.cinema_api_schema import ConcessionResponse


class ConcessionQueryRepoImpl(IConcessionQueryRepo):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io(truncate_content=True)
    async def list_concessions(self) -> List[ConcessionItem]:
        response = await self.api_client.get(CONCESSION_LIST)
        payload: List[ConcessionResponse] = decode_response(response, List[ConcessionResponse])
        return [
            ConcessionItem(
                id=row.concession_id,
                name=row.name,
                category=row.category,
                price=row.price,
                description=row.description or '',
            )
            for row in payload
            if row.is_available
        ]
