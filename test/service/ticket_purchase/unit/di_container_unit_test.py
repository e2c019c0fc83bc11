"""
Unit tests for the dependency injection container wiring

The container builds PurchaseTicketsUseCase with the default stand-in
adapters; tests override the external services with mocks.
"""

from unittest.mock import Mock

import pytest

from src.platform.config.di import Container
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.domain.enum.ticket_type import TicketType
from src.service.ticket_purchase.domain.value_object.purchase_policy import PurchasePolicy
from src.service.ticket_purchase.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)
from src.service.ticket_purchase.driven_adapter.third_party.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.third_party.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)


@pytest.fixture
def container() -> Container:
    return Container()


@pytest.mark.unit
class TestContainer:
    def test_builds_use_case_with_default_adapters(self, container: Container) -> None:
        use_case = container.purchase_tickets_use_case()

        assert isinstance(use_case, PurchaseTicketsUseCase)
        assert isinstance(use_case.payment_service, TicketPaymentServiceImpl)
        assert isinstance(use_case.seat_reservation_service, SeatReservationServiceImpl)
        assert use_case.policy == PurchasePolicy.from_settings(container.config_service())

    def test_default_adapters_accept_purchase(self, container: Container) -> None:
        use_case = container.purchase_tickets_use_case()

        use_case.purchase_tickets(1, [TicketTypeRequest(type=TicketType.ADULT, count=2)])

    def test_override_external_services(
        self,
        container: Container,
        mock_payment_service: Mock,
        mock_seat_reservation_service: Mock,
    ) -> None:
        with (
            container.ticket_payment_service.override(mock_payment_service),
            container.seat_reservation_service.override(mock_seat_reservation_service),
        ):
            use_case = container.purchase_tickets_use_case()
            use_case.purchase_tickets(
                3,
                [
                    TicketTypeRequest(type=TicketType.ADULT, count=1),
                    TicketTypeRequest(type=TicketType.CHILD, count=1),
                ],
            )

        mock_payment_service.make_payment.assert_called_once_with(account_id=3, total_amount=40)
        mock_seat_reservation_service.reserve_seat.assert_called_once_with(
            account_id=3, total_seats=2
        )

    def test_policy_from_overridden_settings(self, container: Container) -> None:
        from src.platform.config.core_setting import Settings

        container.config_service.override(Settings(ADULT_TICKET_PRICE=50))

        use_case = container.purchase_tickets_use_case()

        assert use_case.policy.adult_price == 50
        container.config_service.reset_override()
