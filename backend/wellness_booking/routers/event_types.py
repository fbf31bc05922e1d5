"""Event type catalog routes."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from wellness_booking.auth import Principal, get_current_principal
from wellness_booking.database import get_db
from wellness_booking.schemas.event_type import EventTypeOut
from wellness_booking.services import catalog_service

router = APIRouter()


@router.get("", response_model=list[EventTypeOut])
def list_event_types(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
):
    """All offerable event types, for the booking form's dropdown."""
    return catalog_service.list_event_types(db)
