"""
JWT token utilities for authentication.

Handles encoding and decoding JWT tokens with user_id payload.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
from jose import JWTError, jwt
from pydantic_settings import BaseSettings


class JWTSettings(BaseSettings):
    """JWT configuration settings."""

    secret_key: str = "change-me-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24  # 1 day

    class Config:
        env_prefix = "JWT_"
        env_file = ".env"
        extra = "ignore"


jwt_settings = JWTSettings()


def create_access_token(user_id: UUID) -> str:
    """
    Create a JWT access token for a user.

    Args:
        user_id: The user's UUID

    Returns:
        Encoded JWT token string
    """
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=jwt_settings.access_token_expire_minutes)
    payload = {
        "sub": str(user_id),
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(
        payload, jwt_settings.secret_key, algorithm=jwt_settings.algorithm
    )


def decode_access_token(token: str) -> Optional[UUID]:
    """
    Decode and validate a JWT access token.

    Returns:
        user_id (UUID) if token is valid and unexpired, None otherwise
    """
    try:
        payload = jwt.decode(
            token, jwt_settings.secret_key, algorithms=[jwt_settings.algorithm]
        )
        user_id_str: str = payload.get("sub")
        if user_id_str is None:
            return None
        return UUID(user_id_str)
    except (JWTError, ValueError):
        return None
