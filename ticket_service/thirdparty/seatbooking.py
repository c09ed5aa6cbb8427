import logging
from typing import Protocol

logger = logging.getLogger("thirdparty.seatbooking")


class SeatReservationService(Protocol):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        ...


class SeatReservationServiceImpl:
    """In-process stand-in for the external seat booking provider.

    Reservations always succeed; the request is only logged.
    """

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("Seat reservation requested account_id=%s seats=%s", account_id, total_seats_to_allocate)
