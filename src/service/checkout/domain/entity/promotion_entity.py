from decimal import Decimal

import attrs

from src.service.checkout.domain.enum.discount_type import DiscountType
from src.service.checkout.domain.value_object.price_breakdown import format_money


@attrs.define(frozen=True)
class Promotion:
    id: int
    code: str
    title: str
    discount_type: DiscountType
    discount_value: Decimal
    description: str = ''

    def discount_for(self, subtotal: Decimal) -> Decimal:
        """Discount applied to a subtotal. Not capped at the subtotal."""
        if self.discount_type == DiscountType.PERCENTAGE:
            return subtotal * self.discount_value / Decimal(100)
        return self.discount_value

    @property
    def label(self) -> str:
        if self.discount_type == DiscountType.PERCENTAGE:
            amount = f'{self.discount_value.normalize():f}% OFF'
        else:
            amount = f'{format_money(self.discount_value)} OFF'
        return f'{self.title} - {amount} (Code: {self.code})'
