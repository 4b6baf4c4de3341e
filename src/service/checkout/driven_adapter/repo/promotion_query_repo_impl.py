from typing import List

from src.platform.constant.route_constant import PROMOTION_LIST
from src.platform.http.api_client import ApiClient, decode_response
from src.platform.logging.loguru_io import Logger
from src.service.checkout.app.interface.i_promotion_query_repo import IPromotionQueryRepo
from src.service.checkout.domain.entity.promotion_entity import Promotion
from src.service.checkout.domain.enum.discount_type import DiscountType
from src.service.checkout.driven_adapter.schema.cinema_api_schema import PromotionResponse


class PromotionQueryRepoImpl(IPromotionQueryRepo):
    def __init__(self, *, api_client: ApiClient) -> None:
        self.api_client = api_client

    @Logger.io(truncate_content=True)
    async def list_promotions(self) -> List[Promotion]:
        response = await self.api_client.get(PROMOTION_LIST)
        payload: List[PromotionResponse] = decode_response(response, List[PromotionResponse])
        return [
            Promotion(
                id=row.promotion_id,
                code=row.code,
                title=row.title,
                discount_type=DiscountType(row.discount_type),
                discount_value=row.discount_value,
                description=row.description or '',
            )
            for row in payload
        ]
