"""
Ticket Payment Service Interface

Port to the external payment gateway. The gateway either takes the payment
or raises; there is no return value to inspect.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, *, account_id: int, total_amount: int) -> None:
        """
        Charge the account for the whole purchase

        Args:
            account_id: Purchasing account
            total_amount: Price of all tickets in the purchase
        """
        pass
