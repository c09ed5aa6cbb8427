from pydantic import BaseModel, ConfigDict, Field
from ticket_service.domain.ticketing.models import TicketType


class TicketTypeRequestDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    ticket_type: TicketType | None
    quantity: int


class PurchaseSummaryDTO(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')

    account_id: int = Field(gt=0)
    total_seats: int = Field(ge=0)
    total_amount: int = Field(ge=0)
