from collections.abc import Sequence

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain.ticket_purchase_domain import (
    compute_total_price,
    validate_account_id,
    validate_business_rules,
    validate_ticket_type_requests,
)
from src.service.ticket_purchase.domain.value_object.purchase_policy import PurchasePolicy
from src.service.ticket_purchase.domain.value_object.ticket_detail import TicketDetail
from src.service.ticket_purchase.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case - validate, price, then delegate

    Flow:
    1. Validate account id and request list (Fail Fast)
    2. Aggregate ticket counts and validate business rules
    3. Compute total price and seats to reserve
    4. Take payment, then reserve seats

    Dependencies:
    - payment_service: External payment gateway
    - seat_reservation_service: External seat booking system
    - policy: Ticket limit and prices

    Payment and reservation are not compensated: if reservation fails after
    payment succeeded, the error propagates and the payment stands.
    """

    def __init__(
        self,
        *,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
        policy: PurchasePolicy | None = None,
    ) -> None:
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service
        self.policy = policy or PurchasePolicy()
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    def purchase_tickets(
        self,
        account_id: int | None,
        ticket_type_requests: Sequence[TicketTypeRequest] | None = None,
    ) -> None:
        """
        Raises:
            InvalidPurchaseError: On the first purchase rule broken, nothing is charged or reserved
        """
        with self.tracer.start_as_current_span(
            'use_case.purchase_tickets',
            attributes={'account.id': str(account_id)},
        ):
            validate_account_id(account_id)
            validate_ticket_type_requests(ticket_type_requests, max_tickets=self.policy.max_tickets)

            ticket_detail = TicketDetail.from_requests(ticket_type_requests)  # pyright: ignore[reportArgumentType]
            validate_business_rules(ticket_detail, max_tickets=self.policy.max_tickets)

            total_price = compute_total_price(
                ticket_detail,
                adult_price=self.policy.adult_price,
                child_price=self.policy.child_price,
            )
            total_seats = ticket_detail.seats_to_reserve

            Logger.base.info(
                f'🎫 [PURCHASE] account {account_id}: {ticket_detail.adults} adult, '
                f'{ticket_detail.children} child, {ticket_detail.infants} infant '
                f'→ price {total_price}, seats {total_seats}'
            )

            self.payment_service.make_payment(account_id=account_id, total_amount=total_price)  # pyright: ignore[reportArgumentType]
            self.seat_reservation_service.reserve_seat(account_id=account_id, total_seats=total_seats)  # pyright: ignore[reportArgumentType]
