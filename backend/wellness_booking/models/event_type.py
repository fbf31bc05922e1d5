"""EventType ORM model: a catalog offering bound to exactly one provider."""
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from wellness_booking.database import Base


class EventType(Base):
    __tablename__ = "event_types"

    event_type_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(200), nullable=False)
    description = Column(String(1000), nullable=False, default="")
    provider_id = Column(String(36), ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    provider = relationship("User", lazy="joined")
