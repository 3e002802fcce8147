"""Password handling for the identity service."""

from identity.core.auth.password import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
]
