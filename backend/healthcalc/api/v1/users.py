"""
Current user endpoints: profile read and partial update.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from healthcalc.api.responses import ApiResponse, CamelModel
from healthcalc.db.database import get_db
from healthcalc.domain.enums import Gender
from healthcalc.models.user import User
from healthcalc.utils.auth import get_current_user_id

logger = logging.getLogger(__name__)

router = APIRouter()


class UserInfoResponse(CamelModel):
    """Current user information response."""

    user_id: UUID
    email: str
    gender: Optional[str]
    age: Optional[int]
    created_at: datetime


class UserProfileUpdateRequest(BaseModel):
    """Fields left out of the request are not changed."""

    gender: Optional[Gender] = Field(None, description="Gender: 'male' or 'female'")
    age: Optional[int] = Field(None, ge=1, le=150, description="Age in years")


def _get_user_or_404(db: Session, user_id: UUID) -> User:
    user = db.query(User).filter(User.user_id == user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


@router.get(
    "/me", response_model=ApiResponse[UserInfoResponse], status_code=status.HTTP_200_OK
)
async def get_current_user_info(
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get current authenticated user information."""
    user = _get_user_or_404(db, current_user_id)
    return ApiResponse[UserInfoResponse](
        data=UserInfoResponse.model_validate(user), message="User retrieved"
    )


@router.put(
    "/me/profile",
    response_model=ApiResponse[UserInfoResponse],
    status_code=status.HTTP_200_OK,
)
async def update_user_profile(
    request: UserProfileUpdateRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Update current user's profile (gender and age).

    Requires authentication.
    """
    user = _get_user_or_404(db, current_user_id)

    if request.gender is not None:
        user.gender = request.gender.value
    if request.age is not None:
        user.age = request.age

    db.commit()
    db.refresh(user)
    logger.info(f"[PROFILE] Updated profile for user {current_user_id}")

    return ApiResponse[UserInfoResponse](
        data=UserInfoResponse.model_validate(user), message="Profile updated"
    )
