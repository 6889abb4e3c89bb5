"""Contact and inquiry form submissions."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.lovgol.models.base import utc_now


class ContactSubmission(SQLModel, table=True):
    __tablename__ = "contact_submissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255)
    service: str | None = Field(default=None, max_length=200)
    budget: str | None = Field(default=None, max_length=100)
    message: str
    submitted_at: datetime = Field(default_factory=utc_now, index=True)


class InquirySubmission(SQLModel, table=True):
    __tablename__ = "inquiry_submissions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255)
    service: str = Field(max_length=200)
    details: str
    submitted_at: datetime = Field(default_factory=utc_now, index=True)
