"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from barter.api.dependencies import get_current_user, http_error
from barter.database import get_db
from barter.exceptions import OAuthVerificationError
from barter.models.enums import OAuthProvider
from barter.models.user import User
from barter.schemas.auth import AuthResponse, OAuthLogin, UserLogin, UserRegister, UserResponse
from barter.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    get_or_create_oauth_user,
    get_user_by_email,
)
from barter.services.oauth import verify_provider_id_token

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    # Existence check only; concurrent signups fall back to the unique index
    existing_user = get_user_by_email(db, user_data.email)
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        )

    user = create_user(db, user_data.email, user_data.password, user_data.name)

    access_token = create_access_token(user.id, user.email)

    return AuthResponse(
        access_token=access_token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    user = authenticate_user(db, credentials.email, credentials.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(user.id, user.email)

    return AuthResponse(
        access_token=access_token,
        user=UserResponse.model_validate(user),
    )


@router.post("/oauth/{provider}", response_model=AuthResponse)
async def oauth_login(
    provider: OAuthProvider,
    payload: OAuthLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with a Google or Apple ID token, creating the user on first login."""
    try:
        email = await verify_provider_id_token(provider.value, payload.id_token)
    except OAuthVerificationError as e:
        raise http_error(e) from e

    user = get_or_create_oauth_user(db, email, provider.value)
    access_token = create_access_token(user.id, user.email)

    return AuthResponse(
        access_token=access_token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return current_user
