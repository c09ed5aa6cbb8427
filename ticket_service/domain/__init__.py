from .exceptions import AppError, InvalidPurchase
from .ticketing.models import TicketType, TICKET_PRICES, SEATED_TICKET_TYPES
from .ticketing.schemas import TicketTypeRequestDTO, PurchaseSummaryDTO

__all__ = (
    "AppError", "InvalidPurchase", "TicketType", "TICKET_PRICES", "SEATED_TICKET_TYPES",
    "TicketTypeRequestDTO", "PurchaseSummaryDTO"
)
