"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import AdminFactory, ProjectFactory, ...
"""

from tests.factories.admin import DEFAULT_TEST_PASSWORD, AdminFactory
from tests.factories.base import BaseFactory, short_id, utc_now
from tests.factories.content import BlogPostFactory, CaseStudyFactory, ServicePreviewFactory
from tests.factories.project import ProjectFactory

__all__ = [
    # Base
    "BaseFactory",
    "short_id",
    "utc_now",
    # Accounts
    "AdminFactory",
    "DEFAULT_TEST_PASSWORD",
    # Projects
    "ProjectFactory",
    # Content
    "BlogPostFactory",
    "CaseStudyFactory",
    "ServicePreviewFactory",
]
