"""Principal introspection."""
from fastapi import APIRouter, Depends

from wellness_booking.auth import Principal, get_current_principal
from wellness_booking.schemas.user import PrincipalResponse

router = APIRouter()


@router.get("/me", response_model=PrincipalResponse)
def me(principal: Principal = Depends(get_current_principal)):
    return {"data": principal}
