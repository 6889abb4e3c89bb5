"""Admin factory for test data generation."""

from uuid import uuid4

from polyfactory import Use

from src.lovgol.core.security import hash_password
from src.lovgol.models import Admin
from tests.factories.base import BaseFactory, short_id, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"


class AdminFactory(BaseFactory):
    __model__ = Admin

    id = Use(uuid4)
    username = Use(lambda: f"admin_{short_id()}")
    hashed_password = Use(lambda: hash_password(DEFAULT_TEST_PASSWORD))
    created_at = Use(utc_now)
