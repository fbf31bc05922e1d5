"""Core event service: creation and the pending -> approved/rejected lifecycle.

Responsibilities:
- Provider assignment from the catalog, never from the caller
- Role capabilities and ownership checks (existence before ownership)
- Date matching by exact instant
- Single conditional write per transition, so a concurrent transition on
  the same event loses with InvalidState instead of overwriting
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.orm import Session

from wellness_booking.auth import Principal
from wellness_booking.domain.errors import InvalidState, NotFound
from wellness_booking.domain.lifecycle import (
    Capability,
    EventStatus,
    ensure_transition,
    normalize_remarks,
    resolve_confirmed_date,
)
from wellness_booking.domain.value_objects import EventProposal, Location, ProposedDates
from wellness_booking.models.event import Event, ProposedDate
from wellness_booking.services import authorization, catalog_service
from wellness_booking.services.pagination import Page, PageRequest, paginate

logger = logging.getLogger(__name__)


def _find_event(db: Session, event_id: str) -> Event:
    event = db.query(Event).filter(Event.event_id == event_id).first()
    if not event:
        raise NotFound("Event not found")
    return event


def build_proposal(
    event_type_id: str,
    proposed_dates: Optional[list[datetime]],
    postal_code: Optional[str],
    street_name: Optional[str] = None,
) -> EventProposal:
    """Validate raw request values into an EventProposal. No database access."""
    return EventProposal(
        event_type_id=event_type_id,
        proposed_dates=ProposedDates.from_values(proposed_dates),
        location=Location.from_values(postal_code, street_name),
    )


def create_event(
    db: Session,
    requester: Principal,
    event_type_id: str,
    proposed_dates: Optional[list[datetime]],
    postal_code: Optional[str],
    street_name: Optional[str] = None,
) -> Event:
    """Create a pending event routed to the event type's provider."""
    authorization.require(requester, Capability.create)
    proposal = build_proposal(event_type_id, proposed_dates, postal_code, street_name)
    event_type = catalog_service.resolve_event_type(db, proposal.event_type_id)

    event = Event(
        event_type_id=event_type.event_type_id,
        requester_company_name=requester.company_name,
        postal_code=proposal.location.postal_code,
        street_name=proposal.location.street_name,
        status=EventStatus.pending,
        remarks="",
        requester_id=requester.identity,
        provider_id=event_type.provider_id,
    )
    event.proposed_date_rows = [
        ProposedDate(position=position, proposed_at=instant)
        for position, instant in enumerate(proposal.proposed_dates)
    ]
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info(
        "Created event %s (%s) by requester %s for provider %s",
        event.event_id, event_type.name, requester.identity, event.provider_id,
    )
    return event


def get_event(db: Session, principal: Principal, event_id: str) -> Event:
    """Fetch one event the principal owns."""
    authorization.require(principal, Capability.view)
    event = _find_event(db, event_id)
    authorization.ensure_owner(principal, event)
    return event


def list_events(db: Session, principal: Principal, request: PageRequest) -> Page:
    """Most recent first, limited to the principal's own events."""
    authorization.require(principal, Capability.view)
    query = (
        db.query(Event)
        .filter(authorization.scope(principal))
        .order_by(Event.created_at.desc(), Event.event_id.desc())
    )
    return paginate(query, request)


def _transition(db: Session, event: Event, target: EventStatus, values: dict[str, Any]) -> Event:
    """Move ``event`` from pending to ``target`` with one conditional UPDATE.

    If another request already moved it, no row matches and the caller gets
    InvalidState describing the status that won.
    """
    values = dict(values, status=target, updated_at=datetime.now(timezone.utc))
    updated = (
        db.query(Event)
        .filter(Event.event_id == event.event_id, Event.status == EventStatus.pending)
        .update(values, synchronize_session=False)
    )
    if updated != 1:
        db.rollback()
        db.refresh(event)
        logger.warning(
            "Lost transition race on event %s: wanted %s, found %s",
            event.event_id, target.value, event.status.value,
        )
        raise InvalidState(f"Event is already {event.status.value}")

    db.commit()
    db.refresh(event)
    return event


def approve_event(
    db: Session,
    actor: Principal,
    event_id: str,
    confirmed_date: Optional[datetime],
) -> Event:
    """Provider confirms one of the three proposed dates."""
    authorization.require(actor, Capability.approve)
    event = _find_event(db, event_id)
    authorization.ensure_owner(actor, event)
    ensure_transition(event.status, EventStatus.approved)
    chosen = resolve_confirmed_date(event.proposal, confirmed_date)

    event = _transition(db, event, EventStatus.approved, {"confirmed_date": chosen})
    logger.info("Event %s approved by %s for %s", event_id, actor.identity, chosen.isoformat())
    return event


def reject_event(db: Session, actor: Principal, event_id: str, remarks: Optional[str]) -> Event:
    """Provider declines all three dates, giving a reason."""
    authorization.require(actor, Capability.reject)
    event = _find_event(db, event_id)
    authorization.ensure_owner(actor, event)
    ensure_transition(event.status, EventStatus.rejected)
    reason = normalize_remarks(remarks)

    event = _transition(db, event, EventStatus.rejected, {"remarks": reason})
    logger.info("Event %s rejected by %s", event_id, actor.identity)
    return event
