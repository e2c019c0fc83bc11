"""
Seat Reservation Service Interface

Port to the external seat booking system.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, *, account_id: int, total_seats: int) -> None:
        """
        Reserve seats for the account

        Args:
            account_id: Purchasing account
            total_seats: Number of seats, adults and children only
        """
        pass
