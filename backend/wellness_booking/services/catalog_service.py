"""Catalog of offerable event types. Read-only."""
from sqlalchemy.orm import Session

from wellness_booking.domain.errors import NotFound
from wellness_booking.models.event_type import EventType


def list_event_types(db: Session) -> list[EventType]:
    """All event types, ordered by name (id breaks ties)."""
    return db.query(EventType).order_by(EventType.name, EventType.event_type_id).all()


def resolve_event_type(db: Session, event_type_id: str) -> EventType:
    event_type = db.query(EventType).filter(EventType.event_type_id == event_type_id).first()
    if not event_type:
        raise NotFound("Event type not found")
    return event_type
