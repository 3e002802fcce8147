"""Password hashing and verification utilities using bcrypt."""

import bcrypt

from identity.core.config import get_settings


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password to hash.

    Returns:
        Hashed password string.

    Example:
        >>> hashed = hash_password("my_password")
        >>> len(hashed) > 0
        True
    """
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=get_settings().BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password_bytes, salt)
    # bcrypt returns bytes
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: Plain text password to verify.
        hashed_password: Hashed password to compare against.

    Returns:
        True if password matches, False otherwise.
    """
    try:
        password_bytes = plain_password.encode("utf-8")
        hashed_bytes = hashed_password.encode("utf-8")
        return bcrypt.checkpw(password_bytes, hashed_bytes)
    except (ValueError, TypeError):
        # Invalid hash format
        return False
