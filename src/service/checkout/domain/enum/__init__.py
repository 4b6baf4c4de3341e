"""Checkout Domain Enums"""

from src.service.checkout.domain.enum.concession_category import ConcessionCategory
from src.service.checkout.domain.enum.discount_type import DiscountType
from src.service.checkout.domain.enum.seat_state import SeatState
from src.service.checkout.domain.enum.wizard_step import WizardStep

__all__ = ['ConcessionCategory', 'DiscountType', 'SeatState', 'WizardStep']
