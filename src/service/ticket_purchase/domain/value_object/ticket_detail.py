from collections.abc import Iterable

import attrs

from src.service.ticket_purchase.domain.enum.ticket_type import TicketType
from src.service.ticket_purchase.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


@attrs.frozen
class TicketDetail:
    """Ticket counts per type, summed over every request of one purchase"""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @property
    def total_count(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def seats_to_reserve(self) -> int:
        # Infants sit on an adult's lap
        return self.adults + self.children

    @classmethod
    def from_requests(cls, ticket_type_requests: Iterable[TicketTypeRequest]) -> 'TicketDetail':
        counts = dict.fromkeys(TicketType, 0)
        for request in ticket_type_requests:
            counts[request.type] += request.count

        return cls(
            adults=counts[TicketType.ADULT],
            children=counts[TicketType.CHILD],
            infants=counts[TicketType.INFANT],
        )
