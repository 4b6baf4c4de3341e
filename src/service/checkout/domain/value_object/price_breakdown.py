from decimal import ROUND_HALF_UP, Decimal

import attrs


_CENT = Decimal('0.01')


def format_money(amount: Decimal) -> str:
    """Render an amount the way the checkout summary shows it, e.g. `$45.00` / `-$3.50`"""
    quantized = amount.quantize(_CENT, rounding=ROUND_HALF_UP)
    if quantized < 0:
        return f'-${-quantized}'
    return f'${quantized}'


@attrs.define(frozen=True)
class PriceBreakdown:
    """
    Running totals of a checkout session.

    grand_total is not clamped: a fixed discount larger than the
    subtotal yields a negative total.
    """

    ticket_subtotal: Decimal
    concession_subtotal: Decimal
    discount: Decimal

    @property
    def subtotal(self) -> Decimal:
        return self.ticket_subtotal + self.concession_subtotal

    @property
    def grand_total(self) -> Decimal:
        return self.subtotal - self.discount

    @property
    def has_discount(self) -> bool:
        return self.discount > 0
