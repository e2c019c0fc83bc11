import attrs

from src.service.ticket_purchase.domain.enum.ticket_type import TicketType


@attrs.frozen
class TicketTypeRequest:
    """A number of tickets of one type, as asked for by the buyer"""

    type: TicketType = attrs.field(validator=attrs.validators.instance_of(TicketType))
    count: int = attrs.field(
        validator=[
            attrs.validators.instance_of(int),
            attrs.validators.ge(0),
        ]
    )
