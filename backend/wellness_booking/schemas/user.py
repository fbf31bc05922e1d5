"""Pydantic schemas for users as they appear on the wire."""
from pydantic import Field

from wellness_booking.domain.lifecycle import Role
from wellness_booking.schemas.common import CamelOut


class PartyOut(CamelOut):
    """Requester or provider joined onto an event or event type."""

    user_id: str = Field(serialization_alias="id")
    username: str
    company_name: str


class PrincipalOut(CamelOut):
    user_id: str = Field(serialization_alias="id")
    username: str
    role: Role
    company_name: str


class PrincipalResponse(CamelOut):
    data: PrincipalOut
