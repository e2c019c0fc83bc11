from enum import StrEnum


class TicketType(StrEnum):
    """Ticket categories sold at the venue"""

    ADULT = 'adult'
    CHILD = 'child'
    INFANT = 'infant'  # Sits on an adult's lap, no seat and no charge
