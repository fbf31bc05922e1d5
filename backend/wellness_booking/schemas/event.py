"""Pydantic schemas for Events."""
from __future__ import annotations
from datetime import datetime
from typing import Optional
from pydantic import Field

from wellness_booking.domain.lifecycle import EventStatus
from wellness_booking.schemas.common import CamelIn, CamelOut, Instant
from wellness_booking.schemas.event_type import EventTypeSummary
from wellness_booking.schemas.user import PartyOut


class LocationIn(CamelIn):
    postal_code: Optional[str] = None
    street_name: Optional[str] = None


class EventCreate(CamelIn):
    event_type_id: str
    # Count and distinctness are checked by the domain so the error
    # messages stay the same regardless of how the request arrived.
    proposed_dates: Optional[list[datetime]] = None
    location: Optional[LocationIn] = None


class EventApprove(CamelIn):
    confirmed_date: Optional[datetime] = None


class EventReject(CamelIn):
    remarks: Optional[str] = None


class LocationOut(CamelOut):
    postal_code: str
    street_name: str


class EventOut(CamelOut):
    event_id: str = Field(serialization_alias="id")
    event_type_id: str
    event_type: EventTypeSummary
    requester_company_name: str
    proposed_dates: list[Instant]
    location: LocationOut
    status: EventStatus
    remarks: str
    confirmed_date: Optional[Instant] = None
    requester_id: str
    requester: PartyOut
    provider_id: str
    provider: PartyOut
    created_at: Instant
    updated_at: Instant


class EventResponse(CamelOut):
    data: EventOut


class EventPage(CamelOut):
    data: list[EventOut]
    current_page: int
    total_pages: int
    total_events: int
