from typing import Optional

import attrs

from src.service.checkout.domain.aggregate.checkout_session_aggregate import CheckoutSession


@attrs.define(frozen=True)
class CheckoutEntryResult:
    """
    Outcome of entering the checkout flow.

    Exactly one of session / error_message is set. degraded_sources lists the
    optional reads (concessions, promotions, occupancy) that fell back to empty.
    """

    session: Optional[CheckoutSession] = None
    error_message: Optional[str] = None
    degraded_sources: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.session is not None
