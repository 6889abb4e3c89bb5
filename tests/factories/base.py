"""Base factory configuration for polyfactory."""

from uuid import uuid4

from polyfactory.factories.sqlalchemy_factory import SQLAlchemyFactory

from src.lovgol.models.base import utc_now


def short_id() -> str:
    """Eight hex chars for unique usernames, slugs and titles."""
    return uuid4().hex[-8:]


class BaseFactory(SQLAlchemyFactory):
    """Base factory with common configuration for all models.

    JSON columns are always set explicitly by subclasses.
    """

    __is_base_factory__ = True
    __set_relationships__ = False
    __set_foreign_keys__ = False  # We set FK values explicitly


__all__ = ["BaseFactory", "short_id", "utc_now"]
