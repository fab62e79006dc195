"""
Password hashing with bcrypt.
"""

import bcrypt

# bcrypt only uses the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _encode(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(plain_password: str) -> str:
    """Hash a plaintext password."""
    return bcrypt.hashpw(_encode(plain_password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plaintext password against a stored hash."""
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed hash in the database
        return False
