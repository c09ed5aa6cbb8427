from enum import Enum


class TicketType(str, Enum):
    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


TICKET_PRICES: dict[TicketType, int] = {
    TicketType.ADULT: 25,
    TicketType.CHILD: 15,
    TicketType.INFANT: 0,
}

# Infants sit on an accompanying adult's lap.
SEATED_TICKET_TYPES: frozenset[TicketType] = frozenset({TicketType.ADULT, TicketType.CHILD})
