from ticket_service.domain.ticketing.models import TicketType
from ticket_service.domain.ticketing.schemas import TicketTypeRequestDTO


def adults(quantity: int) -> TicketTypeRequestDTO:
    return TicketTypeRequestDTO(ticket_type=TicketType.ADULT, quantity=quantity)


def children(quantity: int) -> TicketTypeRequestDTO:
    return TicketTypeRequestDTO(ticket_type=TicketType.CHILD, quantity=quantity)


def infants(quantity: int) -> TicketTypeRequestDTO:
    return TicketTypeRequestDTO(ticket_type=TicketType.INFANT, quantity=quantity)


def collaborators(mocker):
    payment = mocker.Mock()
    reservation = mocker.Mock()
    return payment, reservation
