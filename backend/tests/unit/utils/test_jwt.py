"""
Unit tests for JWT token utilities.
"""

from uuid import uuid4

from jose import jwt

from healthcalc.utils.jwt import create_access_token, decode_access_token, jwt_settings


class TestAccessToken:
    """Tests for create_access_token and decode_access_token."""

    def test_round_trip_user_id(self):
        user_id = uuid4()
        assert decode_access_token(create_access_token(user_id)) == user_id

    def test_expiry_uses_configured_lifetime(self):
        """exp - iat equals the configured token lifetime."""
        token = create_access_token(uuid4())
        payload = jwt.decode(
            token, jwt_settings.secret_key, algorithms=[jwt_settings.algorithm]
        )
        lifetime = payload["exp"] - payload["iat"]
        assert lifetime == jwt_settings.access_token_expire_minutes * 60

    def test_invalid_token(self):
        assert decode_access_token("not-a-token") is None

    def test_wrong_secret(self):
        token = jwt.encode(
            {"sub": str(uuid4())}, "other-secret", algorithm=jwt_settings.algorithm
        )
        assert decode_access_token(token) is None
