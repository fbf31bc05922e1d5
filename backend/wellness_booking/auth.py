"""Bearer-token authentication.

Tokens are issued by the identity provider. This module only verifies the
signature, loads the user named in ``sub`` and hands the routers a Principal.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from wellness_booking.config import Settings
from wellness_booking.database import get_db
from wellness_booking.domain.errors import Unauthenticated
from wellness_booking.domain.lifecycle import Role
from wellness_booking.models.user import User

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller."""

    user_id: str
    username: str
    role: Role
    company_name: str

    @property
    def identity(self) -> str:
        return self.user_id


class AuthService:
    """Resolves bearer tokens to principals."""

    def __init__(self, settings: Settings):
        self._secret = settings.JWT_SECRET
        self._algorithm = settings.JWT_ALGORITHM
        self._expires = timedelta(minutes=settings.JWT_EXPIRES_MINUTES)

    def authenticate(self, db: Session, token: str) -> Principal:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            raise Unauthenticated("Invalid or expired token") from e

        user_id = payload.get("sub")
        if not user_id:
            raise Unauthenticated("Invalid token payload")

        user = db.query(User).filter(User.user_id == user_id).first()
        if not user:
            logger.warning("Token presented for unknown user %s", user_id)
            raise Unauthenticated("User no longer exists")

        return Principal(
            user_id=user.user_id,
            username=user.username,
            role=user.role,
            company_name=user.company_name,
        )

    def issue_token(self, user: User, now: Optional[datetime] = None) -> str:
        """Mint a token for ``user``. Used by the seed command and tests only."""
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": user.user_id,
            "role": user.role.value,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._expires).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> Principal:
    """FastAPI dependency: the caller behind the Authorization header."""
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    return auth_service.authenticate(db, credentials.credentials)
