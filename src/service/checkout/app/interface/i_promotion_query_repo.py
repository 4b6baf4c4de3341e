from abc import ABC, abstractmethod
from typing import List

from src.service.checkout.domain.entity.promotion_entity import Promotion


class IPromotionQueryRepo(ABC):
    @abstractmethod
    async def list_promotions(self) -> List[Promotion]:
        """Currently active promotions. Raises ApiRequestError on failure."""
        pass
