"""Cryptographic utilities - password hashing and opaque token handling."""

from hashlib import sha256
from uuid import uuid4

import argon2

from src.lovgol.core.config import get_settings


def hash_token(token: str) -> str:
    """Hash a token using SHA256 for secure storage."""
    return sha256(token.encode()).hexdigest()


def generate_client_access_token() -> str:
    """Random UUIDv4 string granting read-only access to one project."""
    return str(uuid4())


def _create_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with settings from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()


def hash_password(password: str) -> str:
    """Hash password using Argon2id (random salt per hash)."""
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any error."""
    try:
        _password_hasher.verify(hashed, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False
    except argon2.exceptions.VerificationError:
        return False


# Verified against when the username is unknown, so both failure paths take
# the same time.
DUMMY_PASSWORD_HASH = hash_password("lovgol-dummy-password-for-timing")
