"""Ticket Purchase Value Objects"""

from src.service.ticket_purchase.domain.value_object.purchase_policy import PurchasePolicy
from src.service.ticket_purchase.domain.value_object.ticket_detail import TicketDetail
from src.service.ticket_purchase.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)

__all__ = ['PurchasePolicy', 'TicketDetail', 'TicketTypeRequest']
