"""Event ORM model and its three proposed-date rows."""
import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, UniqueConstraint, Enum as SAEnum
from sqlalchemy.orm import relationship
from wellness_booking.database import Base
from wellness_booking.domain.lifecycle import EventStatus
from wellness_booking.domain.value_objects import Location, ProposedDates, to_instant


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Event(Base):
    __tablename__ = "events"

    event_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    event_type_id = Column(String(36), ForeignKey("event_types.event_type_id"), nullable=False)
    requester_company_name = Column(String(200), nullable=False)
    postal_code = Column(String(20), nullable=False)
    street_name = Column(String(200), nullable=False, default="")
    status = Column(SAEnum(EventStatus), nullable=False, default=EventStatus.pending)
    remarks = Column(String(1000), nullable=False, default="")
    confirmed_date = Column(DateTime(timezone=True), nullable=True)
    requester_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    provider_id = Column(String(36), ForeignKey("users.user_id"), nullable=False, index=True)
    # Python-side timestamps keep sub-second ordering on SQLite.
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    event_type = relationship("EventType", lazy="joined")
    requester = relationship("User", foreign_keys=[requester_id], lazy="joined")
    provider = relationship("User", foreign_keys=[provider_id], lazy="joined")
    proposed_date_rows = relationship(
        "ProposedDate",
        back_populates="event",
        order_by="ProposedDate.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    @property
    def proposed_dates(self) -> list[datetime]:
        return [to_instant(row.proposed_at) for row in self.proposed_date_rows]

    @property
    def proposal(self) -> ProposedDates:
        return ProposedDates(values=tuple(self.proposed_dates))

    @property
    def location(self) -> Location:
        return Location(postal_code=self.postal_code, street_name=self.street_name or "")


class ProposedDate(Base):
    __tablename__ = "event_proposed_dates"
    __table_args__ = (
        UniqueConstraint("event_id", "position", name="uq_proposed_date_position"),
        UniqueConstraint("event_id", "proposed_at", name="uq_proposed_date_instant"),
    )

    proposed_date_id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(String(36), ForeignKey("events.event_id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False)
    proposed_at = Column(DateTime(timezone=True), nullable=False)

    event = relationship("Event", back_populates="proposed_date_rows")
