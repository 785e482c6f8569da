"""Authentication service: accounts, password hashing, sessions.

All password operations use bcrypt via passlib. Passwords are never stored
or logged in plaintext. Each sign-in opens an AuthSession row; the token
handed to the client names that row, and signing out deletes it.
"""

import logging
from typing import Optional

from passlib.hash import bcrypt
from sqlalchemy.orm import Session

from ..core.config import settings
from ..exceptions import ValidationError, NotAuthenticatedError
from ..models.user import User, AuthSession

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(db: Session, email: str, password: str) -> User:
    """Create a new user account.

    Raises ValidationError if the email is taken or inputs are invalid.
    """
    email = _normalize_email(email)
    if not email or "@" not in email:
        raise ValidationError("Valid email address required", field="email")
    if len(password) < settings.min_password_length:
        raise ValidationError(
            f"Password must be at least {settings.min_password_length} characters",
            field="password",
        )

    existing = db.query(User).filter(User.email == email).first()
    if existing is not None:
        raise ValidationError("Email already registered", field="email")

    user = User(
        email=email,
        password_hash=bcrypt.hash(password),
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """Validate credentials and return the user.

    Raises NotAuthenticatedError on unknown email, wrong password, or inactive account.
    """
    user = db.query(User).filter(User.email == _normalize_email(email)).first()

    if user is None or not bcrypt.verify(password, user.password_hash):
        raise NotAuthenticatedError("Invalid login credentials")

    if not user.is_active:
        raise NotAuthenticatedError("Account is deactivated")

    return user


def open_session(db: Session, user: User) -> AuthSession:
    session = AuthSession(user_id=user.id)
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def get_session(db: Session, session_id: str, user_id: str) -> Optional[AuthSession]:
    return (
        db.query(AuthSession)
        .filter(AuthSession.id == session_id, AuthSession.user_id == user_id)
        .first()
    )


def close_session(db: Session, session_id: str) -> bool:
    """Delete a session row. Returns True if a session was removed."""
    count = db.query(AuthSession).filter(AuthSession.id == session_id).delete()
    db.commit()
    return count > 0


def get_user_by_id(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()
