"""Event API routes, delegating to event_service for invariant enforcement."""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from wellness_booking.auth import Principal, get_current_principal
from wellness_booking.database import get_db
from wellness_booking.schemas.event import EventApprove, EventCreate, EventPage, EventReject, EventResponse
from wellness_booking.services import event_service
from wellness_booking.services.pagination import PageRequest

router = APIRouter()


@router.get("", response_model=EventPage)
def list_events(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """List the caller's events, most recent first.

    Requesters see what they created, providers see what was routed to them.
    """
    result = event_service.list_events(db, principal, PageRequest.from_query(page, limit))
    return {
        "data": result.items,
        "current_page": result.page,
        "total_pages": result.total_pages,
        "total_events": result.total_count,
    }


@router.get("/{event_id}", response_model=EventResponse)
def get_event(
    event_id: str,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Fetch a single event. Only its requester or provider may see it."""
    return {"data": event_service.get_event(db, principal, event_id)}


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Requester proposes three dates for an event type."""
    location = payload.location
    event = event_service.create_event(
        db=db,
        requester=principal,
        event_type_id=payload.event_type_id,
        proposed_dates=payload.proposed_dates,
        postal_code=location.postal_code if location else None,
        street_name=location.street_name if location else None,
    )
    return {"data": event}


@router.patch("/{event_id}/approve", response_model=EventResponse)
def approve_event(
    event_id: str,
    payload: EventApprove,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Provider confirms one of the proposed dates."""
    event = event_service.approve_event(db, principal, event_id, payload.confirmed_date)
    return {"data": event}


@router.patch("/{event_id}/reject", response_model=EventResponse)
def reject_event(
    event_id: str,
    payload: EventReject,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """Provider turns the request down with a reason."""
    event = event_service.reject_event(db, principal, event_id, payload.remarks)
    return {"data": event}
