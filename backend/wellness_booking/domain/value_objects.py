"""Domain primitives that enforce validity at creation time.

Nothing here touches the database, so every invariant on a proposal can be
checked before a session is ever opened.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Self

import pytz

from wellness_booking.domain.errors import ValidationError

PROPOSED_DATE_COUNT = 3
STREET_NAME_MAX_LENGTH = 200


def to_instant(value: datetime) -> datetime:
    """Normalize a timestamp to an aware UTC instant at millisecond resolution.

    Naive values are taken to be UTC already (SQLite hands them back that way).
    """
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    else:
        value = value.astimezone(pytz.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


@dataclass(frozen=True)
class ProposedDates:
    """Exactly three candidate instants, pairwise distinct, in caller order."""

    values: tuple[datetime, ...]

    def __post_init__(self) -> None:
        if len(self.values) != PROPOSED_DATE_COUNT:
            raise ValidationError("Exactly 3 proposed dates are required")
        if len(set(self.values)) != PROPOSED_DATE_COUNT:
            raise ValidationError("All 3 proposed dates must be different")

    @classmethod
    def from_values(cls, values: Optional[Iterable[datetime]]) -> Self:
        if values is None:
            raise ValidationError("Exactly 3 proposed dates are required")
        return cls(values=tuple(to_instant(v) for v in values))

    def match(self, candidate: datetime) -> Optional[datetime]:
        """Return the proposed instant equal to ``candidate``, if any."""
        instant = to_instant(candidate)
        for value in self.values:
            if value == instant:
                return value
        return None

    def __iter__(self):
        return iter(self.values)


@dataclass(frozen=True)
class Location:
    """Where the event takes place. Postal code is mandatory."""

    postal_code: str
    street_name: str = ""

    def __post_init__(self) -> None:
        if not self.postal_code:
            raise ValidationError("Postal code is required")
        if len(self.street_name) > STREET_NAME_MAX_LENGTH:
            raise ValidationError("Street name cannot exceed 200 characters")

    @classmethod
    def from_values(cls, postal_code: Optional[str], street_name: Optional[str] = None) -> Self:
        return cls(
            postal_code=(postal_code or "").strip(),
            street_name=(street_name or "").strip(),
        )


@dataclass(frozen=True)
class EventProposal:
    """A validated request to book an event type on one of three dates."""

    event_type_id: str
    proposed_dates: ProposedDates
    location: Location

    def __post_init__(self) -> None:
        if not self.event_type_id:
            raise ValidationError("Event type is required")
