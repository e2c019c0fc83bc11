from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class SeatReservationServiceImpl(ISeatReservationService):
    """Stand-in for the third-party seat booking system - logs the reservation and accepts it"""

    @Logger.io
    def reserve_seat(self, *, account_id: int, total_seats: int) -> None:
        Logger.base.info(f'💺 [RESERVATION] Reserved {total_seats} seat(s) for account {account_id}')
