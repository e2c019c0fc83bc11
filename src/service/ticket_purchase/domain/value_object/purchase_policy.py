from typing import Self

import attrs

from src.platform.config.core_setting import Settings


@attrs.frozen
class PurchasePolicy:
    """Ticket limit and prices applied to every purchase"""

    max_tickets: int = 25
    adult_price: int = 25
    child_price: int = 15

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(
            max_tickets=settings.MAX_TICKETS_PER_PURCHASE,
            adult_price=settings.ADULT_TICKET_PRICE,
            child_price=settings.CHILD_TICKET_PRICE,
        )
