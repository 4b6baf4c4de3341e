from decimal import Decimal

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.checkout.domain.enum.concession_category import ConcessionCategory


@attrs.define(frozen=True)
class ConcessionItem:
    """Catalog entry. category stays a plain string so unknown backend categories survive."""

    id: int
    name: str
    category: str
    price: Decimal
    description: str = ''

    @property
    def known_category(self) -> ConcessionCategory | None:
        try:
            return ConcessionCategory(self.category)
        except ValueError:
            return None


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise DomainError(f'{attribute.name} must be at least 1, got {value}')


@attrs.define(frozen=True)
class SelectedConcession:
    item: ConcessionItem
    quantity: int = attrs.field(default=1, validator=_validate_positive)

    @property
    def concession_id(self) -> int:
        return self.item.id

    @property
    def line_total(self) -> Decimal:
        return self.item.price * self.quantity

    def incremented(self) -> 'SelectedConcession':
        return attrs.evolve(self, quantity=self.quantity + 1)

    def decremented(self) -> 'SelectedConcession':
        return attrs.evolve(self, quantity=self.quantity - 1)
