"""Authentication module exposing FastAPI dependencies.

Public interface:
    ``require_user``  returns the CurrentUser or raises NotAuthenticatedError.
    ``optional_user`` returns the CurrentUser or None, never raises.

A token resolves only when its signature and expiry check out, its
session row still exists, and the user is active.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from .config import settings
from .token_factory import decode_token
from ..database import get_db
from ..exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)

_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity every record operation is scoped to."""

    id: str
    email: str
    session_id: str


def optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    db: Session = Depends(get_db),
) -> Optional[CurrentUser]:
    """Resolve the bearer token if present and valid, else None."""
    if credentials is None:
        return None
    return _resolve(credentials.credentials, db)


def require_user(
    user: Optional[CurrentUser] = Depends(optional_user),
) -> CurrentUser:
    """Require a signed-in user."""
    if user is None:
        raise NotAuthenticatedError()
    return user


def _resolve(token: str, db: Session) -> Optional[CurrentUser]:
    from ..services import auth_service

    payload = decode_token(token, settings.jwt_secret_key, settings.jwt_algorithm)
    if payload is None:
        return None

    session = auth_service.get_session(db, payload.sid, payload.sub)
    if session is None:
        logger.debug("Token references a closed session", extra={"user_id": payload.sub})
        return None

    user = auth_service.get_user_by_id(db, payload.sub)
    if user is None or not user.is_active:
        return None

    return CurrentUser(id=user.id, email=user.email, session_id=session.id)
