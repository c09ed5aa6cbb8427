import logging
from typing import Protocol

logger = logging.getLogger("thirdparty.paymentgateway")


class TicketPaymentService(Protocol):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        ...


class TicketPaymentServiceImpl:
    """In-process stand-in for the external payment provider.

    Payments always succeed; the request is only logged.
    """

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Payment requested account_id=%s amount=%s", account_id, total_amount_to_pay)
