"""Authorization guard: what a principal may do and which events it may see."""
from sqlalchemy.sql.elements import ColumnElement

from wellness_booking.auth import Principal
from wellness_booking.domain.errors import Forbidden
from wellness_booking.domain.lifecycle import Capability, Role, can
from wellness_booking.models.event import Event

# Which event column ties a role to the events it owns.
_OWNER_COLUMN = {
    Role.requester: Event.requester_id,
    Role.provider: Event.provider_id,
}


def require(principal: Principal, capability: Capability) -> None:
    if not can(principal.role, capability):
        raise Forbidden()


def scope(principal: Principal) -> ColumnElement[bool]:
    """Query predicate limiting events to those the principal owns."""
    return _OWNER_COLUMN[principal.role] == principal.identity


def owner_of(event: Event, role: Role) -> str:
    return event.requester_id if role == Role.requester else event.provider_id


def ensure_owner(principal: Principal, event: Event) -> None:
    """Raise Forbidden when ``event`` belongs to another party.

    Callers check existence first, so a missing event is a 404, not a 403.
    """
    if owner_of(event, principal.role) != principal.identity:
        raise Forbidden()
