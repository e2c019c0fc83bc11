from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class TicketPaymentServiceImpl(ITicketPaymentService):
    """Stand-in for the third-party payment gateway - logs the charge and accepts it"""

    @Logger.io
    def make_payment(self, *, account_id: int, total_amount: int) -> None:
        Logger.base.info(f'💳 [PAYMENT] Charged account {account_id}: {total_amount}')
