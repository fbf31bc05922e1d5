"""Event lifecycle: statuses, roles, capabilities and the transition table."""
import enum
from datetime import datetime
from typing import Optional

from wellness_booking.domain.errors import InvalidState, ValidationError
from wellness_booking.domain.value_objects import ProposedDates


class EventStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class Role(str, enum.Enum):
    requester = "hr"
    provider = "vendor"


class Capability(str, enum.Enum):
    view = "view"
    create = "create"
    approve = "approve"
    reject = "reject"


CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.requester: frozenset({Capability.view, Capability.create}),
    Role.provider: frozenset({Capability.view, Capability.approve, Capability.reject}),
}

# Terminal states map to an empty set.
TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.pending: frozenset({EventStatus.approved, EventStatus.rejected}),
    EventStatus.approved: frozenset(),
    EventStatus.rejected: frozenset(),
}


def can(role: Role, capability: Capability) -> bool:
    return capability in CAPABILITIES[role]


def is_terminal(current: EventStatus) -> bool:
    return not TRANSITIONS[current]


def ensure_transition(current: EventStatus, target: EventStatus) -> None:
    """Raise InvalidState unless ``current -> target`` is a legal move."""
    if target not in TRANSITIONS[current]:
        raise InvalidState(f"Event is already {current.value}")


def resolve_confirmed_date(proposed: ProposedDates, confirmed: Optional[datetime]) -> datetime:
    """Pick the proposed instant the provider confirmed.

    Matching is by exact instant; two times on the same day are different dates.
    """
    if confirmed is None:
        raise ValidationError("Confirmed date is required")
    match = proposed.match(confirmed)
    if match is None:
        raise ValidationError("Confirmed date must be one of the 3 proposed dates")
    return match


def normalize_remarks(remarks: Optional[str]) -> str:
    cleaned = (remarks or "").strip()
    if not cleaned:
        raise ValidationError("Rejection reason is required")
    return cleaned
