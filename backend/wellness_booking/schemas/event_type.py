"""Pydantic schemas for catalog event types."""
from pydantic import Field

from wellness_booking.schemas.common import CamelOut
from wellness_booking.schemas.user import PartyOut


class EventTypeSummary(CamelOut):
    event_type_id: str = Field(serialization_alias="id")
    name: str
    description: str


class EventTypeOut(EventTypeSummary):
    provider_id: str
    provider: PartyOut
