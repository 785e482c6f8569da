"""Authentication API endpoints.

    POST /api/auth/signup   create an account
    POST /api/auth/signin   verify credentials and receive a session token
    GET  /api/auth/me       current user
    POST /api/auth/signout  close the current session
"""

import logging

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from ..core.auth import CurrentUser, require_user
from ..core.config import settings
from ..core.token_factory import create_token
from ..database import get_db
from ..services import auth_service
from ..services.listing_cache import RootListingCache, get_listing_cache

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


# --- Request/Response schemas ---


class Credentials(BaseModel):
    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")

    model_config = {
        "json_schema_extra": {
            "examples": [{"email": "alice@example.com", "password": "secret123"}]
        }
    }


class UserResponse(BaseModel):
    id: str
    email: str

    model_config = {"from_attributes": True}


class SignInResponse(BaseModel):
    token: str
    user: UserResponse


# --- Endpoints ---


@router.post(
    "/signup",
    response_model=UserResponse,
    status_code=201,
    summary="Create an account",
)
def sign_up(body: Credentials, db: Session = Depends(get_db)):
    user = auth_service.register_user(db, body.email, body.password)
    return UserResponse(id=user.id, email=user.email)


@router.post(
    "/signin",
    response_model=SignInResponse,
    summary="Sign in with email and password",
)
def sign_in(body: Credentials, db: Session = Depends(get_db)):
    user = auth_service.authenticate(db, body.email, body.password)
    session = auth_service.open_session(db, user)
    token = create_token(
        subject=user.id,
        session_id=session.id,
        secret=settings.jwt_secret_key,
        email=user.email,
        algorithm=settings.jwt_algorithm,
        expires_hours=settings.session_expiry_hours,
    )
    logger.info("User signed in", extra={"user_id": user.id})
    return SignInResponse(token=token, user=UserResponse(id=user.id, email=user.email))


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get the signed-in user",
)
def get_me(user: CurrentUser = Depends(require_user)):
    return UserResponse(id=user.id, email=user.email)


@router.post(
    "/signout",
    status_code=204,
    summary="Sign out and revoke the current token",
)
def sign_out(
    user: CurrentUser = Depends(require_user),
    db: Session = Depends(get_db),
    cache: RootListingCache = Depends(get_listing_cache),
):
    auth_service.close_session(db, user.session_id)
    cache.revalidate(user.id)
    logger.info("User signed out", extra={"user_id": user.id})
    return Response(status_code=204)
