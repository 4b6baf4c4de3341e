"""Checkout Domain Entities"""

from src.service.checkout.domain.entity.concession_entity import (
    ConcessionItem,
    SelectedConcession,
)
from src.service.checkout.domain.entity.promotion_entity import Promotion
from src.service.checkout.domain.entity.showtime_entity import Showtime
from src.service.checkout.domain.entity.user_entity import AuthUser

__all__ = ['AuthUser', 'ConcessionItem', 'Promotion', 'SelectedConcession', 'Showtime']
