import pytest
from pydantic import ValidationError
from ticket_service.domain.ticketing.schemas import TicketTypeRequestDTO, PurchaseSummaryDTO
from ticket_service.domain.ticketing.models import TicketType


@pytest.mark.parametrize("ticket_type, quantity", [
    (TicketType.ADULT, 3),
    (TicketType.CHILD, 2),
    (TicketType.INFANT, 1),
    (TicketType.ADULT, 0),
    (None, 5),
])
def test_ticket_type_request_keeps_given_values(ticket_type, quantity):
    dto = TicketTypeRequestDTO(ticket_type=ticket_type, quantity=quantity)

    assert dto.ticket_type == ticket_type
    assert dto.quantity == quantity


def test_ticket_type_request_coerces_ticket_type_name():
    dto = TicketTypeRequestDTO(ticket_type="CHILD", quantity=1)

    assert dto.ticket_type is TicketType.CHILD


def test_ticket_type_request_unknown_ticket_type_fails_validation():
    with pytest.raises(ValidationError):
        TicketTypeRequestDTO(ticket_type="SENIOR", quantity=1)


def test_ticket_type_request_rejects_extra_fields():
    with pytest.raises(ValidationError):
        TicketTypeRequestDTO(ticket_type=TicketType.ADULT, quantity=1, price=25)


def test_ticket_type_request_is_immutable():
    dto = TicketTypeRequestDTO(ticket_type=TicketType.ADULT, quantity=1)

    with pytest.raises(ValidationError):
        dto.quantity = 2


@pytest.mark.parametrize("account_id, total_seats, total_amount", [
    (0, 1, 25),
    (1, -1, 25),
    (1, 1, -25),
])
def test_purchase_summary_rejects_out_of_range_values(account_id, total_seats, total_amount):
    with pytest.raises(ValidationError):
        PurchaseSummaryDTO(account_id=account_id, total_seats=total_seats, total_amount=total_amount)
