"""Security utilities.

Re-exports all security-related functions for convenience.
"""

from src.lovgol.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    generate_client_access_token,
    hash_password,
    hash_token,
    verify_password,
)

__all__ = [
    "DUMMY_PASSWORD_HASH",
    "generate_client_access_token",
    "hash_password",
    "hash_token",
    "verify_password",
]
