from abc import ABC, abstractmethod
from typing import List

from src.service.checkout.domain.entity.concession_entity import ConcessionItem


class IConcessionQueryRepo(ABC):
    @abstractmethod
    async def list_concessions(self) -> List[ConcessionItem]:
        """Full concession catalog. Raises ApiRequestError on failure."""
        pass
