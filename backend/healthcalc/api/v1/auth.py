"""
Authentication endpoints: register and login.
"""

import logging
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field
from sqlalchemy.orm import Session

from healthcalc.api.responses import ApiResponse, CamelModel
from healthcalc.db.database import get_db
from healthcalc.domain.enums import Gender
from healthcalc.models.user import User
from healthcalc.utils.jwt import create_access_token
from healthcalc.utils.password import hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter()


class RegisterRequest(BaseModel):
    """User registration request."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(
        ..., min_length=8, max_length=72, description="Password (8-72 characters)"
    )
    gender: Optional[Gender] = Field(None, description="'male' or 'female'")
    age: Optional[int] = Field(None, ge=1, le=150, description="Age in years")


class LoginRequest(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="User password")


class AuthResponse(CamelModel):
    """Authentication response with user_id and token."""

    user_id: UUID
    token: str
    token_type: str = "bearer"


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: RegisterRequest,
    db: Session = Depends(get_db),
):
    """
    Register a new user account.

    Returns user_id and a JWT token for authenticated requests.
    """
    logger.info(f"[REGISTER] Starting registration for email: {request.email}")

    existing_user = db.query(User).filter(User.email == request.email).first()

    if existing_user:
        logger.warning(f"[REGISTER] Email already registered: {request.email}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    user = User(
        email=request.email,
        password_hash=hash_password(request.password),
        gender=request.gender.value if request.gender else None,
        age=request.age,
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"[REGISTER] Created user {user.user_id}")
    token = create_access_token(user.user_id)
    return ApiResponse[AuthResponse](
        data=AuthResponse(user_id=user.user_id, token=token),
        message="Registration successful",
    )


@router.post(
    "/login", response_model=ApiResponse[AuthResponse], status_code=status.HTTP_200_OK
)
async def login(
    request: LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Login with email and password.

    Validates credentials and returns user_id and JWT token.
    """
    user = db.query(User).filter(User.email == request.email).first()
    if not user or not verify_password(request.password, user.password_hash):
        logger.warning(f"[LOGIN] Failed login for email: {request.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    token = create_access_token(user.user_id)
    return ApiResponse[AuthResponse](
        data=AuthResponse(user_id=user.user_id, token=token),
        message="Login successful",
    )
