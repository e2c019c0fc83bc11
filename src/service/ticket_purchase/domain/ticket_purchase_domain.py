"""
Ticket Purchase Domain
Pure purchase rules and pricing - no payment gateway or seat booking calls here.

Rules are checked in a fixed order and the first broken rule is raised:
account id, request list shape, raw ticket limit, then the rules on the
aggregated ticket counts.
"""

from collections.abc import Sequence

from src.service.ticket_purchase.domain.enum.purchase_error_kind import PurchaseErrorKind
from src.service.ticket_purchase.domain.invalid_purchase_error import InvalidPurchaseError
from src.service.ticket_purchase.domain.value_object.ticket_detail import TicketDetail
from src.service.ticket_purchase.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


def validate_account_id(account_id: int | None) -> None:
    if account_id is None:
        raise InvalidPurchaseError(PurchaseErrorKind.ACCOUNT_MISSING)
    if account_id < 1:
        raise InvalidPurchaseError(PurchaseErrorKind.ACCOUNT_NON_POSITIVE)


def validate_ticket_type_requests(
    ticket_type_requests: Sequence[TicketTypeRequest] | None, *, max_tickets: int
) -> None:
    if ticket_type_requests is None:
        raise InvalidPurchaseError(PurchaseErrorKind.REQUEST_MISSING)
    if len(ticket_type_requests) < 1:
        raise InvalidPurchaseError(PurchaseErrorKind.REQUEST_EMPTY)

    if sum(request.count for request in ticket_type_requests) > max_tickets:
        raise InvalidPurchaseError(PurchaseErrorKind.LIMIT_EXCEEDED)


def validate_business_rules(ticket_detail: TicketDetail, *, max_tickets: int) -> None:
    if ticket_detail.adults < 1:
        raise InvalidPurchaseError(PurchaseErrorKind.MISSING_ADULT)

    # One infant per adult lap
    if ticket_detail.infants > ticket_detail.adults:
        raise InvalidPurchaseError(PurchaseErrorKind.INFANT_EXCEEDS_ADULT)

    if ticket_detail.total_count > max_tickets:
        raise InvalidPurchaseError(PurchaseErrorKind.LIMIT_EXCEEDED)


def compute_total_price(ticket_detail: TicketDetail, *, adult_price: int, child_price: int) -> int:
    return ticket_detail.adults * adult_price + ticket_detail.children * child_price
