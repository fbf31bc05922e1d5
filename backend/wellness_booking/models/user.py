"""User ORM model for the party behind an authenticated principal."""
import uuid
from sqlalchemy import Column, String, DateTime, Enum as SAEnum
from sqlalchemy.sql import func
from wellness_booking.database import Base
from wellness_booking.domain.lifecycle import Role


class User(Base):
    __tablename__ = "users"

    user_id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = Column(String(100), nullable=False, unique=True)
    role = Column(SAEnum(Role), nullable=False)
    company_name = Column(String(200), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
