from abc import ABC, abstractmethod
from typing import Optional

from src.service.checkout.domain.entity.user_entity import AuthUser


class IAuthSession(ABC):
    """Read access to the signed-in user, injected instead of a global auth context"""

    @property
    @abstractmethod
    def current_user(self) -> Optional[AuthUser]:
        pass

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None
