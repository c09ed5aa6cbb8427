from typing import Sequence
from ticket_service.core.auditing import AuditSpan
from ticket_service.domain.exceptions import InvalidPurchase
from ticket_service.domain.ticketing.models import TicketType, TICKET_PRICES, SEATED_TICKET_TYPES
from ticket_service.domain.ticketing.schemas import TicketTypeRequestDTO, PurchaseSummaryDTO
from ticket_service.thirdparty.paymentgateway import TicketPaymentService
from ticket_service.thirdparty.seatbooking import SeatReservationService

MAX_TICKETS_PER_PURCHASE = 25


def _require_valid_account(account_id: int | None) -> None:
    if account_id is None or account_id <= 0:
        raise InvalidPurchase("Account ID must be a positive non-null value", ctx={"account_id": account_id})


def _require_ticket_requests(ticket_requests: Sequence[TicketTypeRequestDTO | None] | None) -> None:
    if not ticket_requests:
        raise InvalidPurchase("At least one ticket request is required")


def _require_valid_ticket_request(ticket_request: TicketTypeRequestDTO | None, index: int) -> None:
    if (
        ticket_request is None
        or ticket_request.ticket_type is None
        or ticket_request.quantity is None
        or ticket_request.quantity <= 0
    ):
        raise InvalidPurchase(
            "Invalid ticket request: null or non-positive ticket count",
            ctx={
                "index": index,
                "ticket_type": ticket_request.ticket_type if ticket_request else None,
                "quantity": ticket_request.quantity if ticket_request else None,
            }
        )


def _count_tickets(ticket_requests: Sequence[TicketTypeRequestDTO | None]) -> dict[TicketType, int]:
    counts = {ticket_type: 0 for ticket_type in TicketType}
    for index, ticket_request in enumerate(ticket_requests):
        _require_valid_ticket_request(ticket_request, index)
        if ticket_request.ticket_type not in counts:
            raise InvalidPurchase(
                "Unknown ticket type", ctx={"index": index, "ticket_type": ticket_request.ticket_type}
            )
        counts[ticket_request.ticket_type] += ticket_request.quantity
    return counts


def _require_within_purchase_limit(counts: dict[TicketType, int]) -> None:
    total_tickets = sum(counts.values())
    if total_tickets > MAX_TICKETS_PER_PURCHASE:
        raise InvalidPurchase(
            f"Cannot purchase more than {MAX_TICKETS_PER_PURCHASE} tickets",
            ctx={"total_tickets": total_tickets, "limit": MAX_TICKETS_PER_PURCHASE}
        )


def _require_adult_for_children_and_infants(counts: dict[TicketType, int]) -> None:
    adults = counts[TicketType.ADULT]
    if (counts[TicketType.CHILD] > 0 or counts[TicketType.INFANT] > 0) and adults == 0:
        raise InvalidPurchase(
            "Child or infant tickets require at least one adult ticket",
            ctx={"child_tickets": counts[TicketType.CHILD], "infant_tickets": counts[TicketType.INFANT]}
        )


def _require_adult_per_infant(counts: dict[TicketType, int]) -> None:
    if counts[TicketType.INFANT] > counts[TicketType.ADULT]:
        raise InvalidPurchase(
            "Each infant must be accompanied by one adult",
            ctx={"adult_tickets": counts[TicketType.ADULT], "infant_tickets": counts[TicketType.INFANT]}
        )


def _total_seats(counts: dict[TicketType, int]) -> int:
    return sum(quantity for ticket_type, quantity in counts.items() if ticket_type in SEATED_TICKET_TYPES)


def _total_amount(counts: dict[TicketType, int]) -> int:
    return sum(quantity * TICKET_PRICES[ticket_type] for ticket_type, quantity in counts.items())


def purchase_tickets(
        payment_service: TicketPaymentService,
        reservation_service: SeatReservationService,
        account_id: int | None,
        ticket_requests: Sequence[TicketTypeRequestDTO | None] | None
) -> PurchaseSummaryDTO:
    """
    Validates a ticket purchase, takes the payment and reserves the seats.

    - Rules are checked in a fixed order and the first violated one raises InvalidPurchase
    - Infants are not charged and do not occupy a seat
    - Payment is always requested before the seat reservation; a zero amount skips the payment
    - Errors raised by the payment or reservation service propagate unchanged
    """
    with AuditSpan(scope="TICKETS", action="PURCHASE", account_id=account_id) as span:
        # Part 1 - validate account and requests
        _require_valid_account(account_id)
        _require_ticket_requests(ticket_requests)
        counts = _count_tickets(ticket_requests)
        _require_within_purchase_limit(counts)
        _require_adult_for_children_and_infants(counts)
        _require_adult_per_infant(counts)

        # Part 2 - totals and external calls
        total_seats = _total_seats(counts)
        total_amount = 0
        if total_seats > 0:
            total_amount = _total_amount(counts)
            if total_amount > 0:
                payment_service.make_payment(account_id, total_amount)
            reservation_service.reserve_seat(account_id, total_seats)

        span.meta.update({"total_seats": total_seats, "total_amount": total_amount})
        return PurchaseSummaryDTO(account_id=account_id, total_seats=total_seats, total_amount=total_amount)
