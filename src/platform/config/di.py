"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.domain.value_object.purchase_policy import PurchasePolicy
from src.service.ticket_purchase.driven_adapter.third_party.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.third_party.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)
    purchase_policy = providers.Singleton(PurchasePolicy.from_settings, settings=config_service)

    # External services
    ticket_payment_service = providers.Singleton(TicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(SeatReservationServiceImpl)

    # Use cases (stateless - new instance per call site)
    purchase_tickets_use_case = providers.Factory(
        PurchaseTicketsUseCase,
        payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
        policy=purchase_policy,
    )


container = Container()
